"""Convenience wrapper functions for easy-to-use API.

Single-peptide and batch feature computation from plain strings, with the
modifications given either as records/tuples or as modification strings
("Oxidation@M", "3").

Examples
--------
>>> features = compute_features("PEPTIDE", charge=2)
>>> features.shape
(6, 164)

>>> # y ions with a modification string
>>> features = compute_features(
...     "PEPTMIDE", charge=2, modifications=("Oxidation@M", "5"), ion_type="y"
... )

>>> # Many peptides at once
>>> matrix, peptide_index = compute_features_batch(
...     ["PEPTIDE", "ACDEK"], charges=[2, 3]
... )
>>> matrix.shape
(10, 164)
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .features.generator import FeaturesGenerator, FeaturesParams
from .features.layout import N_FEATURES
from .modifications import ModificationMatch, as_modification_matches, parse_modifications

logger = logging.getLogger(__name__)

ION_TYPES = ('b', 'y')


def _modification_matches(modifications) -> List[ModificationMatch]:
    """Accept (mods, mod_sites) string pairs besides records/tuples."""
    if (
        isinstance(modifications, tuple)
        and len(modifications) == 2
        and all(isinstance(value, str) for value in modifications)
    ):
        return parse_modifications(*modifications)
    return as_modification_matches(modifications)


def compute_features(
    sequence: str,
    charge: int,
    modifications=None,
    ion_type: str = 'b',
    generator: Optional[FeaturesGenerator] = None,
) -> np.ndarray:
    """Compute the ms2pip features of one peptide.

    Parameters
    ----------
    sequence : str
        Peptide sequence
    charge : int
        Precursor charge state
    modifications : optional
        ModificationMatch records, (site, name[, mass]) tuples, or a
        (mods, mod_sites) pair of modification strings
    ion_type : str, default='b'
        'b' or 'y'
    generator : FeaturesGenerator, optional
        Generator to use, a default one otherwise

    Returns
    -------
    np.ndarray
        Shape (len(sequence) - 1, 164)
    """
    if ion_type not in ION_TYPES:
        raise ValueError(f"Unknown ion type: {ion_type}. Must be 'b' or 'y'")

    if generator is None:
        generator = FeaturesGenerator()

    matches = _modification_matches(modifications)
    if ion_type == 'b':
        return generator.b_ion_features(sequence, charge, matches)
    return generator.y_ion_features(sequence, charge, matches)


def compute_features_batch(
    sequences: Sequence[str],
    charges: Sequence[int],
    modifications: Optional[Sequence] = None,
    ion_type: str = 'b',
    params: Optional[FeaturesParams] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the ms2pip features of many peptides.

    Parameters
    ----------
    sequences : sequence of str
        Peptide sequences
    charges : sequence of int
        Precursor charge of every peptide
    modifications : sequence, optional
        Modifications of every peptide, in any form accepted by
        ``compute_features``; None for unmodified peptides
    ion_type : str, default='b'
        'b' or 'y'
    params : FeaturesParams, optional
        Generator parameters

    Returns
    -------
    features : np.ndarray
        All rows stacked, shape (sum(len(s) - 1), 164)
    peptide_index : np.ndarray (int64)
        Index of the peptide every row belongs to

    Notes
    -----
    Peptides are independent: for parallel processing, split the input and
    call this function per chunk (e.g., with multiprocessing).
    """
    if len(sequences) != len(charges):
        raise ValueError(
            f"Got {len(sequences)} sequences but {len(charges)} charges"
        )
    if modifications is None:
        modifications = [None] * len(sequences)
    elif len(modifications) != len(sequences):
        raise ValueError(
            f"Got {len(sequences)} sequences but {len(modifications)} modification lists"
        )

    logger.info(f"Computing {ion_type} ion features for {len(sequences):,} peptides...")

    generator = FeaturesGenerator(params)
    matrices = []
    indexes = []
    for i, (sequence, charge, peptide_mods) in enumerate(zip(sequences, charges, modifications)):
        matrix = compute_features(sequence, int(charge), peptide_mods, ion_type, generator)
        matrices.append(matrix)
        indexes.append(np.full(len(matrix), i, dtype=np.int64))

    if not matrices:
        return (
            np.zeros((0, N_FEATURES), dtype=generator.params.feature_dtype),
            np.zeros(0, dtype=np.int64),
        )

    features = np.concatenate(matrices)
    peptide_index = np.concatenate(indexes)

    logger.info(f"✓ Computed {len(features):,} feature rows")

    return features, peptide_index
