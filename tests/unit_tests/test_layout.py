"""Tests for the feature column layout."""

import unittest

from ms2pipfast.constants import validate_constants
from ms2pipfast.features.layout import (
    N_FEATURES,
    N_RESERVED,
    ChemFeature,
    FeatureSlot,
    chem_slot,
    feature_names,
    one_hot_slot,
)


class TestFeatureSlots(unittest.TestCase):
    """Test slot positions."""

    def test_width(self):
        """Rows are 164 columns wide."""
        self.assertEqual(N_FEATURES, 164)

    def test_scalar_slots(self):
        """Scalar features at the start of the row."""
        self.assertEqual(FeatureSlot.PEPTIDE_LENGTH, 0)
        self.assertEqual(FeatureSlot.SITE, 1)
        self.assertEqual(FeatureSlot.CHARGE, 10)
        self.assertEqual(FeatureSlot.MODIFICATION_MASS, 11)

    def test_chem_block(self):
        """12 sub-features x 4 properties in columns 12-59."""
        self.assertEqual(len(ChemFeature), 12)
        self.assertEqual(chem_slot(ChemFeature.FIRST, 0), 12)
        self.assertEqual(chem_slot(ChemFeature.FIRST, 3), 15)
        self.assertEqual(chem_slot(ChemFeature.SECOND, 0), 16)
        self.assertEqual(chem_slot(ChemFeature.SUM, 0), 44)
        self.assertEqual(chem_slot(ChemFeature.MIN, 3), 59)

    def test_chem_slots_unique(self):
        """Every sub-feature/property pair has its own column."""
        slots = {chem_slot(feature, p) for feature in ChemFeature for p in range(4)}
        self.assertEqual(slots, set(range(12, 60)))

    def test_reserved(self):
        """Columns 60-75 are reserved."""
        self.assertEqual(FeatureSlot.RESERVED, 60)
        self.assertEqual(N_RESERVED, 16)

    def test_one_hot_blocks(self):
        """Four 20-wide blocks closing the row."""
        self.assertEqual(one_hot_slot(FeatureSlot.FIRST_AA, 0), 84)
        self.assertEqual(one_hot_slot(FeatureSlot.LAST_AA, 0), 104)
        self.assertEqual(one_hot_slot(FeatureSlot.AA, 0), 124)
        self.assertEqual(one_hot_slot(FeatureSlot.NEXT_AA, 19), N_FEATURES - 1)


class TestFeatureNames(unittest.TestCase):
    """Test column names."""

    def test_one_name_per_column(self):
        names = feature_names()
        self.assertEqual(len(names), N_FEATURES)
        self.assertEqual(len(set(names)), N_FEATURES)
        self.assertNotIn('', names)

    def test_known_names(self):
        names = feature_names()
        self.assertEqual(names[0], 'peptide_length')
        self.assertEqual(names[10], 'charge')
        self.assertEqual(names[12], 'chem_first_0')
        self.assertEqual(names[44], 'chem_complement_sum_0')
        self.assertEqual(names[60], 'reserved_60')
        self.assertEqual(names[76], 'mass_sum')
        self.assertEqual(names[84], 'first_aa_A')
        self.assertEqual(names[124], 'aa_A')
        self.assertEqual(names[163], 'next_aa_Y')


class TestConstants(unittest.TestCase):
    """Test the mass tables."""

    def test_validate_constants(self):
        validate_constants()


if __name__ == '__main__':
    unittest.main()
