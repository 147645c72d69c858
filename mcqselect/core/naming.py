"""
Display names for loaded structures
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from .io import SUPPORTED_FORMATS, StructureHandle
from .messages import MessageKind, format_message

logger = logging.getLogger(__name__)

# Longest suffixes first so that ".cif.gz" wins over ".gz"
STRUCTURE_EXTENSIONS = sorted(
    [*SUPPORTED_FORMATS, *(f"{ext}.gz" for ext in SUPPORTED_FORMATS)],
    key=len,
    reverse=True,
)


def strip_structure_extension(file_name: str) -> str:
    """Remove a known structure file extension (case-insensitive) from a file name."""
    lowered = file_name.lower()
    for extension in STRUCTURE_EXTENSIONS:
        if lowered.endswith(extension) and len(file_name) > len(extension):
            return file_name[: -len(extension)]
    return file_name


def model_name(file_path: str | Path, handle: StructureHandle) -> str:
    """
    Name of a structure to be displayed in final results.

    The identifier embedded in the file is used verbatim when present,
    otherwise the file name without its structure extension.
    """
    if handle.id_code and handle.id_code.strip():
        return handle.id_code
    return strip_structure_extension(Path(file_path).name)


def split_names(names_csv: str) -> list[str]:
    """Split a comma-separated name list, dropping empty tokens."""
    return [token for token in names_csv.split(",") if token]


def build_name_map(paths: Sequence[str], names_csv: str | None) -> dict[str, str]:
    """
    Pair model paths with user-supplied display names.

    Names are assigned by position. The map is keyed by path, so a path given
    twice ends up with the name of its last occurrence.

    Args:
        paths: Model file paths in command-line order
        names_csv: Comma-separated names (no spaces), or None

    Returns:
        Dict mapping path to name; empty when no names were given or when the
        number of names differs from the number of paths
    """
    if names_csv is None or not names_csv.strip():
        return {}

    names = split_names(names_csv)

    if len(names) != len(paths):
        logger.warning(
            "%s",
            format_message(MessageKind.NAME_COUNT_MISMATCH, names=len(names), models=len(paths)),
        )
        return {}

    return {str(path): name for path, name in zip(paths, names, strict=True)}
