"""
Shared test fixtures and helpers for GEMMI-compatible testing
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from mcqselect.core.io import StructureHandle
from mcqselect.core.residues import STANDARD_AA_CODES

# Backbone atoms laid out along x so that consecutive residues are bonded
NUCLEOTIDE_ATOMS = {"P": 0.0, "O3'": 4.4}
AMINO_ACID_ATOMS = {"N": 0.0, "CA": 1.2, "C": 2.5}
RESIDUE_SPACING = {"nucleotide": 6.0, "amino_acid": 3.8}


def create_mock_gemmi_atom(name, x=0.0, y=0.0, z=0.0):
    """Create a GEMMI-compatible mock atom"""
    atom = Mock()
    atom.name = name
    pos = Mock()
    pos.x = x
    pos.y = y
    pos.z = z
    atom.pos = pos
    return atom


def create_mock_gemmi_residue(resname, seqid_num=1, icode=" ", atoms=None):
    """Create a GEMMI-compatible mock residue"""
    residue = Mock()
    residue.name = resname

    # Mock seqid (GEMMI uses seqid with num and icode attributes)
    seqid = Mock()
    seqid.num = seqid_num
    seqid.icode = icode
    residue.seqid = seqid

    atoms = list(atoms or [])
    residue.__iter__ = lambda self: iter(atoms)
    return residue


def create_backbone_residue(resname, seqid_num, offset, icode=" "):
    """Residue whose backbone atoms start at x=offset."""
    layout = AMINO_ACID_ATOMS if resname in STANDARD_AA_CODES else NUCLEOTIDE_ATOMS
    atoms = [create_mock_gemmi_atom(name, offset + dx) for name, dx in layout.items()]
    return create_mock_gemmi_residue(resname, seqid_num, icode, atoms)


def create_rna_chain_residues(count, start=1, resnames="GCAU", offset=0.0, gap_after=None):
    """Consecutive bonded nucleotides; a gap after residue number gap_after breaks the backbone."""
    residues = []
    x = offset
    for i in range(count):
        number = start + i
        residues.append(create_backbone_residue(resnames[i % len(resnames)], number, x))
        x += RESIDUE_SPACING["nucleotide"]
        if gap_after is not None and number == gap_after:
            x += 10.0
    return residues


def create_mock_gemmi_chain(chain_name, residues):
    """Create a GEMMI-compatible mock chain"""
    chain = Mock()
    chain.name = chain_name
    chain.__iter__ = lambda self: iter(residues)
    return chain


def create_mock_gemmi_model(chains):
    """Create a GEMMI-compatible mock model"""
    model = Mock()
    model.__iter__ = lambda self: iter(chains)
    return model


def create_handle(chains, id_code="", path="model.pdb"):
    """StructureHandle around mock chains"""
    return StructureHandle(path=Path(path), id_code=id_code, model=create_mock_gemmi_model(chains))


def pdb_atom_line(serial, atom_name, resname, chain, resseq, x, y=0.0, z=0.0, element=None):
    """Fixed-column PDB ATOM record"""
    name = atom_name if len(atom_name) == 4 else f" {atom_name:<3s}"
    element = element or atom_name[0]
    return (
        f"ATOM  {serial:5d} {name:4s} {resname:>3s} {chain:1s}{resseq:4d}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{1.0:6.2f}{20.0:6.2f}          {element:>2s}"
    )


def write_rna_pdb(path, chains, id_code=None, models=1):
    """
    Write a PDB file with bonded RNA chains.

    Args:
        path: Output file path
        chains: Dict mapping chain name to number of residues
        id_code: Optional identifier written to the HEADER record
        models: Number of identical models to write
    """
    lines = []
    if id_code:
        lines.append(f"HEADER    {'RNA':<40s}01-JAN-00   {id_code:4s}")
    for model_number in range(1, models + 1):
        if models > 1:
            lines.append(f"MODEL     {model_number:4d}")
        serial = 1
        x = 0.0
        for chain, count in chains.items():
            for number in range(1, count + 1):
                resname = "GCAU"[(number - 1) % 4]
                for atom_name, dx in NUCLEOTIDE_ATOMS.items():
                    lines.append(pdb_atom_line(serial, atom_name, resname, chain, number, x + dx))
                    serial += 1
                x += RESIDUE_SPACING["nucleotide"]
            lines.append("TER")
            x += 50.0
        if models > 1:
            lines.append("ENDMDL")
    lines.append("END")
    Path(path).write_text("\n".join(lines) + "\n")
    return Path(path)


@pytest.fixture
def two_chain_handle():
    """RNA structure with 30 residues in chain A and 20 in chain B"""
    chain_a = create_mock_gemmi_chain("A", create_rna_chain_residues(30))
    chain_b = create_mock_gemmi_chain("B", create_rna_chain_residues(20, offset=500.0))
    return create_handle([chain_a, chain_b])
