"""Residue mass metrics along a peptide sequence.

For every fragmentation site i (bond between residues i and i + 1, i in
[0, L - 2]) this computes running aggregates of the residue masses:

- prefix sum/min/max over residues 0..i (the b ion side)
- suffix sum/min/max over residues i + 1..L - 1 (the complementary side)
- running mass of residues and modifications 0..i

The total mass is the sum of residues 0..L - 2: the last residue and the
modifications are excluded, matching the ms2pip convention. Consequently
``prefix_sum[i] + suffix_sum[i] == total_mass + aa_masses[-1]`` for all i.

Both passes are single linear scans with O(1) updates per residue.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
from numba import njit

from ..constants import AA_MASSES_DICT, MODIFICATION_MASSES
from ..exceptions import SequenceTooShortError, UnknownResidueError
from ..modifications import ModificationMatch, modification_mass_array


@dataclass
class PeptideMetrics:
    """Residue mass metrics of a peptide, indexed by residue or by site."""

    # Per residue (length L)
    aa_masses: np.ndarray
    modification_masses: np.ndarray

    # Sum of residue masses 0..L-2
    total_mass: float

    # Per fragmentation site (length L - 1)
    prefix_sum: np.ndarray
    prefix_min: np.ndarray
    prefix_max: np.ndarray
    suffix_sum: np.ndarray
    suffix_min: np.ndarray
    suffix_max: np.ndarray
    running_mass: np.ndarray

    @property
    def n_sites(self) -> int:
        return len(self.prefix_sum)


@njit(cache=True)
def mass_functions(
    aa_masses: np.ndarray,
    modification_masses: np.ndarray,
) -> Tuple[float, np.ndarray, np.ndarray, np.ndarray,
           np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Compute the running mass aggregates (Numba-compiled).

    Parameters
    ----------
    aa_masses : np.ndarray (float64)
        Residue masses, length L >= 2
    modification_masses : np.ndarray (float64)
        Modification mass per residue, length L

    Returns
    -------
    total_mass : float
        Sum of residue masses 0..L-2
    prefix_sum, prefix_min, prefix_max : np.ndarray (float64)
        Aggregates over residues 0..i, length L - 1
    suffix_sum, suffix_min, suffix_max : np.ndarray (float64)
        Aggregates over residues i+1..L-1, length L - 1
    running_mass : np.ndarray (float64)
        Residue plus modification masses over residues 0..i, length L - 1
    """
    n_sites = len(aa_masses) - 1

    prefix_sum = np.empty(n_sites, dtype=np.float64)
    prefix_min = np.empty(n_sites, dtype=np.float64)
    prefix_max = np.empty(n_sites, dtype=np.float64)
    running_mass = np.empty(n_sites, dtype=np.float64)

    # Forward pass
    total_mass = 0.0
    running = 0.0
    min_mass = np.inf
    max_mass = 0.0
    for i in range(n_sites):
        aa_mass = aa_masses[i]
        total_mass += aa_mass
        running += aa_mass
        running += modification_masses[i]
        if aa_mass < min_mass:
            min_mass = aa_mass
        if aa_mass > max_mass:
            max_mass = aa_mass
        prefix_sum[i] = total_mass
        prefix_min[i] = min_mass
        prefix_max[i] = max_mass
        running_mass[i] = running

    suffix_sum = np.empty(n_sites, dtype=np.float64)
    suffix_min = np.empty(n_sites, dtype=np.float64)
    suffix_max = np.empty(n_sites, dtype=np.float64)

    # Rewind pass, seeded with the last residue
    aa_mass = aa_masses[n_sites]
    sum_mass = aa_mass
    min_mass = aa_mass
    max_mass = aa_mass
    suffix_sum[n_sites - 1] = sum_mass
    suffix_min[n_sites - 1] = min_mass
    suffix_max[n_sites - 1] = max_mass

    for i in range(n_sites - 1, 0, -1):
        aa_mass = aa_masses[i]
        sum_mass += aa_mass
        if aa_mass < min_mass:
            min_mass = aa_mass
        elif aa_mass > max_mass:
            max_mass = aa_mass
        suffix_sum[i - 1] = sum_mass
        suffix_min[i - 1] = min_mass
        suffix_max[i - 1] = max_mass

    return (
        total_mass,
        prefix_sum, prefix_min, prefix_max,
        suffix_sum, suffix_min, suffix_max,
        running_mass,
    )


def residue_mass_array(
    peptide: str,
    residue_masses: Dict[str, float] = AA_MASSES_DICT,
) -> np.ndarray:
    """Look up the mass of every residue.

    Raises
    ------
    UnknownResidueError
        If a residue is missing from ``residue_masses``
    """
    masses = np.empty(len(peptide), dtype=np.float64)
    for position, aa in enumerate(peptide):
        try:
            masses[position] = residue_masses[aa]
        except KeyError:
            raise UnknownResidueError(aa, position, peptide) from None
    return masses


def compute_peptide_metrics(
    peptide: str,
    modifications: Optional[List[ModificationMatch]] = None,
    residue_masses: Dict[str, float] = AA_MASSES_DICT,
    modification_masses: Dict[str, float] = MODIFICATION_MASSES,
) -> PeptideMetrics:
    """Compute the residue mass metrics of a peptide.

    Parameters
    ----------
    peptide : str
        Peptide sequence, at least 2 residues
    modifications : List[ModificationMatch], optional
        Modifications with 1-based sites
    residue_masses : Dict[str, float]
        Residue -> monoisotopic mass lookup
    modification_masses : Dict[str, float]
        Modification name -> mass lookup, for modifications without mass

    Returns
    -------
    PeptideMetrics

    Raises
    ------
    SequenceTooShortError, UnknownResidueError,
    InvalidModificationSiteError, UnknownModificationError

    Examples
    --------
    >>> metrics = compute_peptide_metrics("PEPTIDE")
    >>> metrics.n_sites
    6
    """
    if len(peptide) < 2:
        raise SequenceTooShortError(peptide)

    aa_masses = residue_mass_array(peptide, residue_masses)
    mod_masses = modification_mass_array(
        modifications or [], len(peptide), modification_masses
    )

    (
        total_mass,
        prefix_sum, prefix_min, prefix_max,
        suffix_sum, suffix_min, suffix_max,
        running_mass,
    ) = mass_functions(aa_masses, mod_masses)

    return PeptideMetrics(
        aa_masses=aa_masses,
        modification_masses=mod_masses,
        total_mass=total_mass,
        prefix_sum=prefix_sum,
        prefix_min=prefix_min,
        prefix_max=prefix_max,
        suffix_sum=suffix_sum,
        suffix_min=suffix_min,
        suffix_max=suffix_max,
        running_mass=running_mass,
    )
