"""Unit tests for the amino acid property and index tables."""

import numpy as np
import pytest

from ms2pipfast.exceptions import (
    FeatureGenerationError,
    SequenceTooShortError,
    UnknownResidueError,
)
from ms2pipfast.features.properties import (
    AA_INDEXES,
    AA_INDEX_ARRAY,
    CHEM_PROPERTIES,
    CHEMICAL_PROPERTIES,
    N_CHEM_PROPERTIES,
    N_IMPLEMENTED_AAS,
    encode_peptide_to_ord,
    index_of,
    properties_of,
)


class TestIndexTable:
    """Test the ms2pip residue index table."""

    def test_twenty_residues(self):
        """Indexes cover 20 residues with ordinals 0..19."""
        assert len(AA_INDEXES) == N_IMPLEMENTED_AAS
        assert sorted(AA_INDEXES.values()) == list(range(20))

    def test_alphabetical_order(self):
        """ms2pip indexes follow the alphabetical order of the codes."""
        assert list(AA_INDEXES) == sorted(AA_INDEXES)
        assert index_of('A') == 0
        assert index_of('K') == 8
        assert index_of('Y') == 19

    def test_unknown_residue(self):
        """Non-standard residues are rejected."""
        for residue in ('X', 'B', 'Z', 'U', '?', 'a'):
            with pytest.raises(UnknownResidueError):
                index_of(residue)

    def test_ord_array_matches_dict(self):
        """ord()-indexed array agrees with the mapping."""
        for aa, index in AA_INDEXES.items():
            assert AA_INDEX_ARRAY[ord(aa)] == index
        assert AA_INDEX_ARRAY[ord('X')] == -1


class TestChemicalProperties:
    """Test the chemical property table."""

    def test_known_values(self):
        """Spot-check table values."""
        assert properties_of('A') == (10, 51, 93, 40)
        assert properties_of('S') == (100, 22, 53, 100)
        assert properties_of('Q') == (34, 0, 0, 44)

    def test_scale(self):
        """All scores have 4 entries in 0..100."""
        for aa in AA_INDEXES:
            values = properties_of(aa)
            assert len(values) == N_CHEM_PROPERTIES
            assert all(0 <= value <= 100 for value in values)

    def test_placeholder_key_keeps_last_entry(self):
        """The three placeholder entries collide, only the last survives."""
        assert len(CHEMICAL_PROPERTIES) == N_IMPLEMENTED_AAS + 1
        assert CHEMICAL_PROPERTIES['?'] == (35, 28, 47, 40)

    def test_placeholder_not_implemented(self):
        """The placeholder residue is not accepted as input."""
        with pytest.raises(UnknownResidueError):
            properties_of('?')

    def test_ord_array_matches_dict(self):
        """ord()-indexed array agrees with the mapping."""
        for aa in AA_INDEXES:
            np.testing.assert_array_equal(CHEM_PROPERTIES[ord(aa)], CHEMICAL_PROPERTIES[aa])

    def test_tables_read_only(self):
        """Shared arrays cannot be modified."""
        with pytest.raises(ValueError):
            CHEM_PROPERTIES[ord('A'), 0] = 0


class TestEncodePeptide:
    """Test peptide validation and encoding."""

    def test_encoding(self):
        """Encoded peptide holds the ord() values."""
        peptide_ord = encode_peptide_to_ord("PEPTIDE")
        assert peptide_ord.dtype == np.uint8
        np.testing.assert_array_equal(peptide_ord, [80, 69, 80, 84, 73, 68, 69])

    def test_too_short(self):
        """Fewer than 2 residues is rejected."""
        for peptide in ("", "K"):
            with pytest.raises(SequenceTooShortError):
                encode_peptide_to_ord(peptide)

    def test_unknown_residue_position(self):
        """The error reports residue and position."""
        with pytest.raises(UnknownResidueError) as excinfo:
            encode_peptide_to_ord("PEPXIDE")
        assert excinfo.value.residue == 'X'
        assert excinfo.value.position == 3
        assert "PEPXIDE" in str(excinfo.value)

    def test_lowercase_rejected(self):
        """Sequences are case sensitive."""
        with pytest.raises(UnknownResidueError):
            encode_peptide_to_ord("peptide")

    def test_errors_are_value_errors(self):
        """Input errors share a ValueError base."""
        with pytest.raises(FeatureGenerationError):
            encode_peptide_to_ord("A")
        with pytest.raises(ValueError):
            encode_peptide_to_ord("AJ")
