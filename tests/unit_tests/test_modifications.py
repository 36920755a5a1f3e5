"""Unit tests for the modifications module."""

import numpy as np
import pytest

from ms2pipfast.constants import (
    CARBAMIDOMETHYL_MASS,
    MODIFICATION_MASSES,
    OXIDATION_MASS,
)
from ms2pipfast.exceptions import InvalidModificationSiteError, UnknownModificationError
from ms2pipfast.modifications import (
    ModificationMatch,
    as_modification_matches,
    modification_mass_array,
    parse_modifications,
    resolve_modification_mass,
    reverse_modifications,
    validate_modification_sites,
)


class TestParseModifications:
    """Test modification parsing functionality."""

    def test_empty_modifications(self):
        """Test parsing empty modification strings."""
        assert parse_modifications("", "") == []
        assert parse_modifications(None, "") == []
        assert parse_modifications("", "1") == []

    def test_single_modification(self):
        """Sites stay 1-based."""
        result = parse_modifications("Carbamidomethyl@C", "3")
        assert result == [ModificationMatch(3, "Carbamidomethyl")]
        assert result[0].mass is None

    def test_multiple_modifications(self):
        """Test parsing multiple modifications."""
        result = parse_modifications("Carbamidomethyl@C;Oxidation@M", "3;6")
        assert result == [
            ModificationMatch(3, "Carbamidomethyl"),
            ModificationMatch(6, "Oxidation"),
        ]

    def test_byte_string_sites(self):
        """Test parsing sites as byte strings."""
        result = parse_modifications("Oxidation@M", "b'5'")
        assert result == [ModificationMatch(5, "Oxidation")]

    def test_invalid_format(self):
        """Malformed entries are skipped."""
        assert parse_modifications("Carbamidomethyl", "3") == []
        assert parse_modifications("Carbamidomethyl@C", "abc") == []

    def test_whitespace_handling(self):
        """Test handling of whitespace in modifications."""
        result = parse_modifications(" Carbamidomethyl@C ; Oxidation@M ", " 3 ; 6 ")
        assert result == [
            ModificationMatch(3, "Carbamidomethyl"),
            ModificationMatch(6, "Oxidation"),
        ]


class TestModificationMatches:
    """Test normalization and mass resolution."""

    def test_tuples_normalized(self):
        """Plain tuples become ModificationMatch records."""
        result = as_modification_matches([(2, "Oxidation"), (4, "Phospho", 79.97)])
        assert result == [
            ModificationMatch(2, "Oxidation", None),
            ModificationMatch(4, "Phospho", 79.97),
        ]
        assert as_modification_matches(None) == []

    def test_explicit_mass_wins(self):
        """Explicit mass takes precedence over the lookup."""
        assert resolve_modification_mass(ModificationMatch(1, "Oxidation", 16.0)) == 16.0

    def test_lookup(self):
        """Name-only modification uses the lookup."""
        assert resolve_modification_mass(ModificationMatch(1, "Oxidation")) == OXIDATION_MASS
        assert resolve_modification_mass(
            ModificationMatch(1, "Custom"), {"Custom": 1.5}
        ) == 1.5

    def test_unknown_name(self):
        """Unknown name without mass raises."""
        with pytest.raises(UnknownModificationError) as excinfo:
            resolve_modification_mass(ModificationMatch(1, "Unobtainium"))
        assert excinfo.value.name == "Unobtainium"

    def test_default_table(self):
        """Default table holds the common modifications."""
        assert MODIFICATION_MASSES["Carbamidomethyl"] == CARBAMIDOMETHYL_MASS
        assert set(MODIFICATION_MASSES) == {
            "Carbamidomethyl", "Oxidation", "Acetyl", "Phospho", "Deamidation"
        }


class TestSites:
    """Test site validation and remapping."""

    def test_valid_sites(self):
        """Sites 1 and L are both valid."""
        validate_modification_sites([ModificationMatch(1, "A"), ModificationMatch(7, "B")], 7)

    def test_invalid_sites(self):
        """0 and L + 1 are out of range."""
        for site in (0, 8, -3):
            with pytest.raises(InvalidModificationSiteError):
                validate_modification_sites([ModificationMatch(site, "Oxidation")], 7)

    def test_reverse(self):
        """Site s maps to L - s + 1."""
        mods = [ModificationMatch(1, "Acetyl"), ModificationMatch(3, "Oxidation", 16.0)]
        assert reverse_modifications(mods, 7) == [
            ModificationMatch(7, "Acetyl"),
            ModificationMatch(5, "Oxidation", 16.0),
        ]

    def test_reverse_twice(self):
        """Reversing twice gives the original sites."""
        mods = [ModificationMatch(site, "Oxidation") for site in range(1, 10)]
        assert reverse_modifications(reverse_modifications(mods, 9), 9) == mods


class TestModificationMassArray:
    """Test per-residue modification masses."""

    def test_empty(self):
        """No modification: zeros."""
        np.testing.assert_array_equal(modification_mass_array([], 5), np.zeros(5))

    def test_positions(self):
        """1-based sites land at 0-based indexes."""
        masses = modification_mass_array(
            [ModificationMatch(1, "Acetyl"), ModificationMatch(5, "Oxidation")], 5
        )
        assert masses[0] == pytest.approx(MODIFICATION_MASSES["Acetyl"])
        assert masses[4] == pytest.approx(OXIDATION_MASS)
        assert masses[1:4].sum() == 0.0

    def test_accumulates(self):
        """Masses on the same site add up."""
        masses = modification_mass_array(
            [ModificationMatch(2, "X", 1.0), ModificationMatch(2, "Y", 2.5)], 3
        )
        np.testing.assert_allclose(masses, [0.0, 3.5, 0.0])

    def test_invalid_site(self):
        """Out-of-range sites are rejected, not clamped."""
        with pytest.raises(InvalidModificationSiteError):
            modification_mass_array([ModificationMatch(4, "Oxidation")], 3)
