"""Structure file handling and validation."""

import logging
from dataclasses import dataclass
from pathlib import Path

import gemmi

from .errors import StructureLoadError
from .messages import MessageKind, format_message
from .residues import ResidueRef

logger = logging.getLogger(__name__)

# GEMMI supports .pdb, .cif, .ent (PDB), .mmcif and their gzipped variants
SUPPORTED_FORMATS = {".pdb", ".cif", ".ent", ".mmcif"}

ENTRY_ID_TAG = "_entry.id"


@dataclass
class StructureHandle:
    """
    First model of a loaded structure file.

    Attributes:
        path: File the structure was loaded from
        id_code: Identifier embedded in the file (PDB HEADER or mmCIF _entry.id), may be empty
        model: First GEMMI model of the structure
        model_count: Number of models found in the file
        structure: Parsed structure owning the model
    """

    path: Path
    id_code: str
    model: gemmi.Model
    model_count: int = 1
    structure: gemmi.Structure | None = None

    def residues(self) -> list[ResidueRef]:
        """All residues of the model in the order of appearance in the file."""
        return [ResidueRef(chain.name, residue) for chain in self.model for residue in chain]


def file_type(file_path: Path) -> str:
    """Get the file extension in lowercase, looking through a trailing .gz."""
    suffixes = [suffix.lower() for suffix in Path(file_path).suffixes]
    if len(suffixes) > 1 and suffixes[-1] == ".gz":
        return suffixes[-2]
    return str(Path(file_path).suffix).lower()


def embedded_id_code(structure: gemmi.Structure) -> str:
    """Identifier stored in the file metadata, or an empty string."""
    info = structure.info
    if ENTRY_ID_TAG in info:
        return info[ENTRY_ID_TAG].strip()
    return ""


def load_structure(file_path: Path) -> StructureHandle:
    """
    Load the first PDB or PDBx/mmCIF model in a given file.

    Args:
        file_path: Path to the structure file

    Returns:
        StructureHandle wrapping the first model

    Raises:
        StructureLoadError: If the file cannot be read or parsed, or contains no model
    """
    file_path = Path(file_path)
    ftype = file_type(file_path)
    if ftype not in SUPPORTED_FORMATS:
        raise StructureLoadError(
            MessageKind.LOAD_FAILED, path=file_path, reason=f"unsupported file type '{ftype}'"
        )

    try:
        structure = gemmi.read_structure(str(file_path))
    except (OSError, RuntimeError, ValueError) as e:
        raise StructureLoadError(MessageKind.LOAD_FAILED, path=file_path, reason=e) from e

    model_count = len(structure)
    if model_count == 0:
        raise StructureLoadError(MessageKind.NO_MODELS, path=file_path)

    if model_count > 1:
        logger.info(
            "%s", format_message(MessageKind.MORE_THAN_ONE_MODEL, path=file_path, count=model_count)
        )

    logger.debug("Loaded %s (%d models)", file_path, model_count)
    return StructureHandle(
        path=file_path,
        id_code=embedded_id_code(structure),
        model=structure[0],
        model_count=model_count,
        structure=structure,
    )
