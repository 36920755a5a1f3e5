"""Column layout of the ms2pip feature vectors.

Every fragmentation site yields one row of ``N_FEATURES`` (164) integers. The
meaning of each column is fixed: the pretrained ms2pip models index their
inputs by column, so the layout below must not change.

=========  ==========================================================
Columns    Content
=========  ==========================================================
0          peptide length
1          site ordinal (0-based)
2          site position in percent of the peptide length
3          total mass (residues 0..L-2)
4-7        chemical property totals divided by the peptide length
8          running mass (residues and modifications 0..i)
9          total mass minus running mass
10         charge
11         modification mass at the site
12-59      chemical block, 12 features x 4 properties (see ChemFeature)
60-75      reserved, always 0
76-83      residue mass statistics, forward then complementary side
84-103     one-hot of the first residue
104-123    one-hot of the last residue
124-143    one-hot of the current residue
144-163    one-hot of the next residue
=========  ==========================================================
"""

from enum import IntEnum
from typing import List

from .properties import AA_INDEXES, N_CHEM_PROPERTIES, N_IMPLEMENTED_AAS

N_FEATURES = 164


class FeatureSlot(IntEnum):
    """Column of a scalar feature, or first column of a block."""

    PEPTIDE_LENGTH = 0
    SITE = 1
    RELATIVE_SITE = 2
    TOTAL_MASS = 3
    CHEM_TOTAL = 4  # N_CHEM_PROPERTIES wide
    RUNNING_MASS = 8
    COMPLEMENT_MASS = 9
    CHARGE = 10
    MODIFICATION_MASS = 11
    CHEM_BLOCK = 12  # len(ChemFeature) * N_CHEM_PROPERTIES wide
    RESERVED = 60
    MASS_SUM = 76
    MASS_SUM_NORMALIZED = 77
    MASS_MAX = 78
    MASS_MIN = 79
    COMPLEMENT_MASS_SUM = 80
    COMPLEMENT_MASS_SUM_NORMALIZED = 81
    COMPLEMENT_MASS_MAX = 82
    COMPLEMENT_MASS_MIN = 83
    FIRST_AA = 84  # N_IMPLEMENTED_AAS wide
    LAST_AA = 104
    AA = 124
    NEXT_AA = 144


class ChemFeature(IntEnum):
    """Sub-features of the chemical block, one group of 4 columns each.

    SUM, SUM_NORMALIZED, MAX and MIN are written twice, first with the
    forward aggregates and then with the complementary ones, so the columns
    end up holding the complementary values.
    """

    FIRST = 0
    SECOND = 1
    PENULTIMATE = 2
    LAST = 3
    AA = 4
    PREVIOUS = 5
    NEXT = 6
    SECOND_NEXT = 7
    SUM = 8
    SUM_NORMALIZED = 9
    MAX = 10
    MIN = 11


N_RESERVED = FeatureSlot.MASS_SUM - FeatureSlot.RESERVED

# Columns holding the forward aggregates are overwritten by these
OVERWRITTEN_CHEM_FEATURES = (
    ChemFeature.SUM,
    ChemFeature.SUM_NORMALIZED,
    ChemFeature.MAX,
    ChemFeature.MIN,
)


def chem_slot(feature: ChemFeature, chem_property: int) -> int:
    """Column of a chemical block feature for one property (0..3)."""
    return FeatureSlot.CHEM_BLOCK + feature * N_CHEM_PROPERTIES + chem_property


def one_hot_slot(block: FeatureSlot, aa_index: int) -> int:
    """Column of a residue in one of the one-hot blocks."""
    return block + aa_index


def feature_names() -> List[str]:
    """Return one name per column, in column order.

    Examples
    --------
    >>> names = feature_names()
    >>> names[:3]
    ['peptide_length', 'site', 'relative_site']
    >>> names[124]
    'aa_A'
    """
    names = [''] * N_FEATURES

    for slot in (
        FeatureSlot.PEPTIDE_LENGTH,
        FeatureSlot.SITE,
        FeatureSlot.RELATIVE_SITE,
        FeatureSlot.TOTAL_MASS,
        FeatureSlot.RUNNING_MASS,
        FeatureSlot.COMPLEMENT_MASS,
        FeatureSlot.CHARGE,
        FeatureSlot.MODIFICATION_MASS,
        FeatureSlot.MASS_SUM,
        FeatureSlot.MASS_SUM_NORMALIZED,
        FeatureSlot.MASS_MAX,
        FeatureSlot.MASS_MIN,
        FeatureSlot.COMPLEMENT_MASS_SUM,
        FeatureSlot.COMPLEMENT_MASS_SUM_NORMALIZED,
        FeatureSlot.COMPLEMENT_MASS_MAX,
        FeatureSlot.COMPLEMENT_MASS_MIN,
    ):
        names[slot] = slot.name.lower()

    for p in range(N_CHEM_PROPERTIES):
        names[FeatureSlot.CHEM_TOTAL + p] = f'chem_total_{p}'
        for feature in ChemFeature:
            if feature in OVERWRITTEN_CHEM_FEATURES:
                name = f'chem_complement_{feature.name.lower()}_{p}'
            else:
                name = f'chem_{feature.name.lower()}_{p}'
            names[chem_slot(feature, p)] = name

    for offset in range(N_RESERVED):
        names[FeatureSlot.RESERVED + offset] = f'reserved_{FeatureSlot.RESERVED + offset}'

    for block in (FeatureSlot.FIRST_AA, FeatureSlot.LAST_AA, FeatureSlot.AA, FeatureSlot.NEXT_AA):
        for aa, index in AA_INDEXES.items():
            names[one_hot_slot(block, index)] = f'{block.name.lower()}_{aa}'

    return names


assert FeatureSlot.NEXT_AA + N_IMPLEMENTED_AAS == N_FEATURES
assert chem_slot(ChemFeature.MIN, N_CHEM_PROPERTIES - 1) == FeatureSlot.RESERVED - 1
