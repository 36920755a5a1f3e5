"""Chemical property functions along a peptide sequence.

For every fragmentation site i in [0, L - 2], with ``chem[k]`` the property
vector of residue k:

- previous/current/next/second next residue properties:
  ``chem[max(i - 1, 0)]``, ``chem[i]``, ``chem[i + 1]``,
  ``chem[min(i + 2, L - 1)]``. At the sequence ends the window saturates on
  the first and last residue instead of running out of the sequence.
- running sum/min/max of residues 0..i (forward functions)
- running sum/min/max of residues i + 1..L - 1 (rewind functions)

Each direction is a single pass keeping four running vectors.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numba import njit

from .properties import CHEM_PROPERTIES, encode_peptide_to_ord


@dataclass
class PeptideChemFunctions:
    """Chemical property functions of a peptide, shape (L - 1, 4) each."""

    previous_aa: np.ndarray
    aa: np.ndarray
    next_aa: np.ndarray
    second_next_aa: np.ndarray

    # Residues 0..i
    chem_sum: np.ndarray
    chem_min: np.ndarray
    chem_max: np.ndarray

    # Residues i+1..L-1
    chem_sum_complement: np.ndarray
    chem_min_complement: np.ndarray
    chem_max_complement: np.ndarray


@njit(cache=True)
def forward_chem_functions(
    chem: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray,
           np.ndarray, np.ndarray, np.ndarray]:
    """Neighbour properties and running aggregates from the N-terminus.

    Parameters
    ----------
    chem : np.ndarray (int64)
        Residue properties, shape (L, n_properties), L >= 2

    Returns
    -------
    previous_aa, aa, next_aa, second_next_aa : np.ndarray (int64)
        Shape (L - 1, n_properties)
    chem_sum, chem_min, chem_max : np.ndarray (int64)
        Aggregates over residues 0..i, shape (L - 1, n_properties)
    """
    last = chem.shape[0] - 1
    n_sites = last
    n_properties = chem.shape[1]

    previous_aa = np.empty((n_sites, n_properties), dtype=np.int64)
    aa = np.empty((n_sites, n_properties), dtype=np.int64)
    next_aa = np.empty((n_sites, n_properties), dtype=np.int64)
    second_next_aa = np.empty((n_sites, n_properties), dtype=np.int64)
    chem_sum = np.empty((n_sites, n_properties), dtype=np.int64)
    chem_min = np.empty((n_sites, n_properties), dtype=np.int64)
    chem_max = np.empty((n_sites, n_properties), dtype=np.int64)

    running_sum = chem[0].copy()
    running_min = chem[0].copy()
    running_max = chem[0].copy()

    for i in range(n_sites):
        if i > 0:
            for p in range(n_properties):
                value = chem[i, p]
                if value > running_max[p]:
                    running_max[p] = value
                elif value < running_min[p]:
                    running_min[p] = value
                running_sum[p] += value

        previous_index = i - 1 if i > 0 else 0
        second_next_index = i + 2 if i + 2 <= last else last

        previous_aa[i] = chem[previous_index]
        aa[i] = chem[i]
        next_aa[i] = chem[i + 1]
        second_next_aa[i] = chem[second_next_index]
        chem_sum[i] = running_sum
        chem_min[i] = running_min
        chem_max[i] = running_max

    return previous_aa, aa, next_aa, second_next_aa, chem_sum, chem_min, chem_max


@njit(cache=True)
def rewind_chem_functions(
    chem: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Running aggregates from the C-terminus.

    Parameters
    ----------
    chem : np.ndarray (int64)
        Residue properties, shape (L, n_properties), L >= 2

    Returns
    -------
    chem_sum, chem_min, chem_max : np.ndarray (int64)
        Aggregates over residues i+1..L-1, shape (L - 1, n_properties)
    """
    n_sites = chem.shape[0] - 1
    n_properties = chem.shape[1]

    chem_sum = np.empty((n_sites, n_properties), dtype=np.int64)
    chem_min = np.empty((n_sites, n_properties), dtype=np.int64)
    chem_max = np.empty((n_sites, n_properties), dtype=np.int64)

    # Seeded with the last residue
    running_sum = chem[n_sites].copy()
    running_min = chem[n_sites].copy()
    running_max = chem[n_sites].copy()

    for i in range(n_sites - 1, -1, -1):
        chem_sum[i] = running_sum
        chem_min[i] = running_min
        chem_max[i] = running_max

        if i > 0:
            for p in range(n_properties):
                value = chem[i, p]
                if value > running_max[p]:
                    running_max[p] = value
                elif value < running_min[p]:
                    running_min[p] = value
                running_sum[p] += value

    return chem_sum, chem_min, chem_max


def residue_chem_properties(peptide: str) -> np.ndarray:
    """Return the property vectors of the residues, shape (L, 4).

    Raises
    ------
    SequenceTooShortError, UnknownResidueError
    """
    return CHEM_PROPERTIES[encode_peptide_to_ord(peptide)]


def compute_chem_functions(peptide: str) -> PeptideChemFunctions:
    """Compute the chemical property functions of a peptide.

    Raises
    ------
    SequenceTooShortError, UnknownResidueError

    Examples
    --------
    >>> chem_functions = compute_chem_functions("PEPTIDE")
    >>> chem_functions.aa.shape
    (6, 4)
    """
    chem = residue_chem_properties(peptide)

    previous_aa, aa, next_aa, second_next_aa, chem_sum, chem_min, chem_max = \
        forward_chem_functions(chem)
    chem_sum_complement, chem_min_complement, chem_max_complement = \
        rewind_chem_functions(chem)

    return PeptideChemFunctions(
        previous_aa=previous_aa,
        aa=aa,
        next_aa=next_aa,
        second_next_aa=second_next_aa,
        chem_sum=chem_sum,
        chem_min=chem_min,
        chem_max=chem_max,
        chem_sum_complement=chem_sum_complement,
        chem_min_complement=chem_min_complement,
        chem_max_complement=chem_max_complement,
    )
