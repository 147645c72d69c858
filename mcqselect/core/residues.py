"""
Residue classification and backbone connectivity

Residues are classified as standard amino acids or nucleotides (DNA/RNA) by
their residue name. Two consecutive polymer residues are considered linked
when the backbone bond between them is present:
- Proteins: C (residue i) to N (residue i+1)
- DNA/RNA: O3' (residue i) to P (residue i+1)
"""

from dataclasses import dataclass

import gemmi
import numpy as np
from Bio.Data.IUPACData import protein_letters_3to1

# Maximum length (Angstroms) of a backbone bond between consecutive residues
BOND_LENGTH_THRESHOLD = 2.0

# Define DNA nucleotide mapping
DNA_NUCLEOTIDE_MAP = {
    "DA": "A",
    "DT": "T",
    "DG": "G",
    "DC": "C",
}

# RNA nucleotides, including legacy 3-letter codes
RNA_NUCLEOTIDE_MAP = {
    "A": "A",
    "U": "U",
    "G": "G",
    "C": "C",
    "ADE": "A",
    "URA": "U",
    "GUA": "G",
    "CYT": "C",
}

NUCLEIC_ACID_MAP = {**DNA_NUCLEOTIDE_MAP, **RNA_NUCLEOTIDE_MAP}

# Mapping from 3-letter to 1-letter codes for the 20 standard amino acids
AA_THREE_TO_ONE = {
    three.upper(): one
    for three, one in protein_letters_3to1.items()
    if one not in {"B", "Z", "X", "U", "O", "J"}
}

STANDARD_AA_CODES = set(AA_THREE_TO_ONE)

PROTEIN = "protein"
NUCLEIC_ACID = "nucleic_acid"

# (atom closing the bond in residue i, atom opening it in residue i+1)
BACKBONE_LINK_ATOMS = {
    PROTEIN: ("C", "N"),
    NUCLEIC_ACID: ("O3'", "P"),
}


@dataclass(frozen=True)
class ResidueRef:
    """A residue of a loaded model together with the name of its chain."""

    chain_name: str
    residue: gemmi.Residue

    @property
    def name(self) -> str:
        return self.residue.name

    @property
    def number(self) -> int:
        return self.residue.seqid.num

    @property
    def icode(self) -> str:
        icode = self.residue.seqid.icode
        return icode.strip() if icode else ""

    @property
    def key(self) -> tuple[int, str]:
        """Sortable residue identifier within a chain."""
        return (self.number, self.icode)

    @property
    def label(self) -> str:
        return f"{self.chain_name}:{self.number}{self.icode}"


def is_standard_aa(residue: gemmi.Residue) -> bool:
    """Check if a GEMMI residue is a standard amino acid."""
    return residue.name in STANDARD_AA_CODES


def is_nucleotide(residue: gemmi.Residue) -> bool:
    """Check if a GEMMI residue is a DNA or RNA nucleotide."""
    return residue.name in NUCLEIC_ACID_MAP


def polymer_type(residue: gemmi.Residue) -> str | None:
    """Return PROTEIN, NUCLEIC_ACID or None for ligands, water and others."""
    if is_standard_aa(residue):
        return PROTEIN
    if is_nucleotide(residue):
        return NUCLEIC_ACID
    return None


def is_polymer_residue(residue: gemmi.Residue) -> bool:
    return polymer_type(residue) is not None


def _atom_coordinates(residue: gemmi.Residue, atom_name: str) -> np.ndarray | None:
    for atom in residue:
        if atom.name == atom_name:
            return np.array([atom.pos.x, atom.pos.y, atom.pos.z])
    return None


def are_connected(
    previous: ResidueRef, current: ResidueRef, threshold: float = BOND_LENGTH_THRESHOLD
) -> bool:
    """
    Check whether two consecutive residues are linked along the backbone.

    Residues from different chains, of different polymer types, or missing
    either backbone atom are never connected.

    Args:
        previous: Residue appearing first in the file
        current: Residue directly following it
        threshold: Maximum bond length in Angstroms

    Returns:
        True if the backbone bond length is within the threshold
    """
    if previous.chain_name != current.chain_name:
        return False

    kind = polymer_type(previous.residue)
    if kind is None or kind != polymer_type(current.residue):
        return False

    closing_atom, opening_atom = BACKBONE_LINK_ATOMS[kind]
    closing = _atom_coordinates(previous.residue, closing_atom)
    opening = _atom_coordinates(current.residue, opening_atom)
    if closing is None or opening is None:
        return False

    return float(np.linalg.norm(closing - opening)) <= threshold


def fragment_sequence(residues: list[ResidueRef]) -> str:
    """One-letter sequence of residues; unknown residues are shown as X."""
    return "".join(
        AA_THREE_TO_ONE.get(ref.name) or NUCLEIC_ACID_MAP.get(ref.name, "X") for ref in residues
    )
