"""Tests for residue classification and backbone connectivity"""

import pytest

from conftest import create_backbone_residue, create_mock_gemmi_atom, create_mock_gemmi_residue
from mcqselect.core.residues import (
    ResidueRef,
    are_connected,
    fragment_sequence,
    is_nucleotide,
    is_polymer_residue,
    is_standard_aa,
    polymer_type,
)


class TestClassification:
    """Test residue type detection."""

    @pytest.mark.parametrize("resname", ["ALA", "GLY", "TRP", "TYR"])
    def test_amino_acids(self, resname):
        residue = create_mock_gemmi_residue(resname)
        assert is_standard_aa(residue)
        assert polymer_type(residue) == "protein"

    @pytest.mark.parametrize("resname", ["A", "U", "G", "C", "DA", "DT", "ADE"])
    def test_nucleotides(self, resname):
        residue = create_mock_gemmi_residue(resname)
        assert is_nucleotide(residue)
        assert polymer_type(residue) == "nucleic_acid"

    @pytest.mark.parametrize("resname", ["HOH", "MG", "SO4", "UNK"])
    def test_other_residues(self, resname):
        assert not is_polymer_residue(create_mock_gemmi_residue(resname))


class TestResidueRef:
    """Test residue identifiers."""

    def test_label_without_insertion_code(self):
        ref = ResidueRef("A", create_mock_gemmi_residue("G", 12, " "))
        assert ref.label == "A:12"
        assert ref.key == (12, "")

    def test_label_with_insertion_code(self):
        ref = ResidueRef("B", create_mock_gemmi_residue("G", 7, "A"))
        assert ref.label == "B:7A"
        assert ref.key == (7, "A")


class TestConnectivity:
    """Test backbone link detection."""

    def test_bonded_nucleotides(self):
        previous = ResidueRef("A", create_backbone_residue("G", 1, 0.0))
        current = ResidueRef("A", create_backbone_residue("C", 2, 6.0))
        assert are_connected(previous, current)

    def test_distant_nucleotides(self):
        previous = ResidueRef("A", create_backbone_residue("G", 1, 0.0))
        current = ResidueRef("A", create_backbone_residue("C", 2, 20.0))
        assert not are_connected(previous, current)

    def test_bonded_amino_acids(self):
        previous = ResidueRef("A", create_backbone_residue("ALA", 1, 0.0))
        current = ResidueRef("A", create_backbone_residue("GLY", 2, 3.8))
        assert are_connected(previous, current)

    def test_different_chains(self):
        previous = ResidueRef("A", create_backbone_residue("G", 1, 0.0))
        current = ResidueRef("B", create_backbone_residue("C", 1, 6.0))
        assert not are_connected(previous, current)

    def test_polymer_type_change(self):
        previous = ResidueRef("A", create_backbone_residue("ALA", 1, 0.0))
        current = ResidueRef("A", create_backbone_residue("G", 2, 0.0))
        assert not are_connected(previous, current)

    def test_missing_backbone_atom(self):
        only_phosphate = create_mock_gemmi_residue("G", 1, atoms=[create_mock_gemmi_atom("P")])
        previous = ResidueRef("A", only_phosphate)
        current = ResidueRef("A", create_backbone_residue("C", 2, 0.5))
        assert not are_connected(previous, current)

    def test_custom_threshold(self):
        previous = ResidueRef("A", create_backbone_residue("G", 1, 0.0))
        current = ResidueRef("A", create_backbone_residue("C", 2, 6.0))
        assert not are_connected(previous, current, threshold=1.0)


def test_fragment_sequence():
    refs = [ResidueRef("A", create_mock_gemmi_residue(name)) for name in ["G", "DA", "ALA", "HOH"]]
    assert fragment_sequence(refs) == "GAAX"
