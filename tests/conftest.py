"""Pytest configuration for ms2pipfast tests.

Common fixtures: example peptides, a default generator, residue masses.
"""

import numpy as np
import pytest


@pytest.fixture
def simple_peptide():
    """Peptide used in the worked feature examples."""
    return "ACDEFGHIK"


@pytest.fixture
def tryptic_peptides():
    """Collection of typical tryptic peptides."""
    return [
        "PEPTIDE",
        "ACDEK",
        "TESTPEPTIDER",
        "YGGFMTSEK",
        "LGEHNIDVLEGNEQFINAAK",
        "GK",
        "MWR",
    ]


@pytest.fixture
def generator():
    """Feature generator with default parameters."""
    from ms2pipfast.features import FeaturesGenerator
    return FeaturesGenerator()


@pytest.fixture
def aa_masses_dict():
    """Amino acid masses dictionary."""
    from ms2pipfast.constants import AA_MASSES_DICT
    return AA_MASSES_DICT


@pytest.fixture
def random_peptides():
    """Random peptides over the 20 implemented residues, lengths 2 to 40."""
    from ms2pipfast.features.properties import AA_INDEXES
    alphabet = np.array(sorted(AA_INDEXES))
    rng = np.random.default_rng(7)
    return [
        ''.join(rng.choice(alphabet, size=length))
        for length in rng.integers(2, 41, size=25)
    ]


# Random seed for reproducibility
@pytest.fixture(scope="session", autouse=True)
def set_random_seed():
    """Set random seed for reproducible tests."""
    np.random.seed(42)
