"""ms2pip feature vectors for b and y ions.

Assembles, for every fragmentation site of a peptide, the 164-column integer
feature row consumed by ms2pip intensity models (see ``layout`` for the
column meanings). The running aggregates come from the Numba-compiled passes
in ``metrics`` and ``chem``; the assembly writes whole columns at once.

y ion features are the b ion features of the reversed peptide, with the
modification sites remapped to the reversed sequence.

Examples
--------
>>> generator = FeaturesGenerator()
>>> features = generator.b_ion_features("ACDEFGHIK", charge=2)
>>> features.shape
(8, 164)

>>> # Oxidized methionine at site 3 (1-based)
>>> features = generator.y_ion_features(
...     "PEMTIDEK", charge=2, modifications=[(3, "Oxidation")]
... )
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

import numpy as np

from ..constants import AA_MASSES_DICT, MODIFICATION_MASSES
from ..modifications import (
    as_modification_matches,
    reverse_modifications,
    validate_modification_sites,
)
from .chem import compute_chem_functions
from .layout import N_FEATURES, ChemFeature, FeatureSlot, chem_slot
from .metrics import compute_peptide_metrics
from .properties import (
    AA_INDEX_ARRAY,
    CHEM_PROPERTIES,
    N_CHEM_PROPERTIES,
    encode_peptide_to_ord,
)


@dataclass
class FeaturesParams:
    """Parameters of the feature generator.

    The mass lookups are injected here rather than read from module state, so
    that custom residue or modification masses stay local to one generator.
    """

    # Residue -> monoisotopic mass (Da)
    residue_masses: Dict[str, float] = field(
        default_factory=lambda: dict(AA_MASSES_DICT)
    )

    # Modification name -> mass shift (Da), for modifications given without mass
    modification_masses: Dict[str, float] = field(
        default_factory=lambda: dict(MODIFICATION_MASSES)
    )

    # The original ms2pip residue cursor lags behind the site from site 1 on:
    # site 0 encodes (s[0], s[1]), site 1 (s[1], s[1]), site i >= 2
    # (s[i-1], s[i]) as current/next residue. False encodes (s[i], s[i+1]).
    legacy_residue_cursor: bool = True

    # Integer type of the feature matrix
    feature_dtype: type = np.int32

    def with_modifications(self, modification_masses: Dict[str, float]) -> 'FeaturesParams':
        """Return a copy with additional modification masses.

        Args:
            modification_masses: Name -> mass entries, overriding existing names

        Returns:
            New FeaturesParams, this instance is left untouched
        """
        return dataclasses.replace(
            self,
            modification_masses={**self.modification_masses, **modification_masses},
        )


def _truncate(values, dtype) -> np.ndarray:
    """Cast to integers, truncating toward zero."""
    return np.trunc(values).astype(dtype)


class FeaturesGenerator:
    """Computes ms2pip features of peptides.

    Stateless apart from its parameters: one instance can be shared across
    peptides and threads.
    """

    def __init__(self, params: Optional[FeaturesParams] = None):
        self.params = params if params is not None else FeaturesParams()

    def b_ion_features(
        self,
        peptide: str,
        charge: int,
        modifications: Optional[Iterable] = None,
    ) -> np.ndarray:
        """Return the features of the b ions of a peptide.

        Parameters
        ----------
        peptide : str
            Peptide sequence over the 20 implemented amino acids, >= 2 residues
        charge : int
            Precursor charge, >= 1
        modifications : iterable, optional
            ModificationMatch records or (site, name[, mass]) tuples, 1-based sites

        Returns
        -------
        features : np.ndarray
            Shape (len(peptide) - 1, 164), one row per fragmentation site

        Raises
        ------
        SequenceTooShortError, UnknownResidueError,
        InvalidModificationSiteError, UnknownModificationError
            On invalid peptide input
        ValueError
            If charge < 1
        """
        return self.ions_features(peptide, as_modification_matches(modifications), charge)

    def y_ion_features(
        self,
        peptide: str,
        charge: int,
        modifications: Optional[Iterable] = None,
    ) -> np.ndarray:
        """Return the features of the y ions of a peptide.

        Computed as the b ion features of the reversed peptide, modification
        site s moved to len(peptide) - s + 1. Row i therefore describes the
        y ion made of the last i + 1 residues.

        Parameters and errors as in ``b_ion_features``.
        """
        encode_peptide_to_ord(peptide)
        matches = as_modification_matches(modifications)
        validate_modification_sites(matches, len(peptide))

        return self.ions_features(
            peptide[::-1],
            reverse_modifications(matches, len(peptide)),
            charge,
        )

    def ions_features(self, peptide: str, modifications, charge: int) -> np.ndarray:
        """Assemble the feature matrix of a sequence read from its N-terminus."""
        if charge < 1:
            raise ValueError(f"Charge must be >= 1, got {charge}")

        params = self.params
        dtype = params.feature_dtype

        peptide_ord = encode_peptide_to_ord(peptide)
        peptide_length = len(peptide)
        n_sites = peptide_length - 1

        metrics = compute_peptide_metrics(
            peptide,
            modifications,
            params.residue_masses,
            params.modification_masses,
        )
        chem_functions = compute_chem_functions(peptide)

        chem = CHEM_PROPERTIES[peptide_ord]
        chem_total = chem.sum(axis=0) // peptide_length

        sites = np.arange(n_sites)
        forward_length = sites + 1
        complement_length = peptide_length - forward_length

        features = np.zeros((n_sites, N_FEATURES), dtype=dtype)

        # Peptide and site
        features[:, FeatureSlot.PEPTIDE_LENGTH] = peptide_length
        features[:, FeatureSlot.SITE] = sites
        features[:, FeatureSlot.RELATIVE_SITE] = _truncate(100.0 * sites / peptide_length, dtype)
        features[:, FeatureSlot.TOTAL_MASS] = int(metrics.total_mass)
        features[:, FeatureSlot.CHEM_TOTAL:FeatureSlot.CHEM_TOTAL + N_CHEM_PROPERTIES] = chem_total

        # Masses
        features[:, FeatureSlot.RUNNING_MASS] = _truncate(metrics.running_mass, dtype)
        features[:, FeatureSlot.COMPLEMENT_MASS] = _truncate(
            metrics.total_mass - metrics.running_mass, dtype
        )
        features[:, FeatureSlot.CHARGE] = charge
        features[:, FeatureSlot.MODIFICATION_MASS] = _truncate(
            metrics.modification_masses[:n_sites], dtype
        )

        # Chemical block
        for p in range(N_CHEM_PROPERTIES):
            features[:, chem_slot(ChemFeature.FIRST, p)] = chem[0, p]
            features[:, chem_slot(ChemFeature.SECOND, p)] = chem[1, p]
            features[:, chem_slot(ChemFeature.PENULTIMATE, p)] = chem[peptide_length - 2, p]
            features[:, chem_slot(ChemFeature.LAST, p)] = chem[peptide_length - 1, p]
            features[:, chem_slot(ChemFeature.AA, p)] = chem_functions.aa[:, p]
            features[:, chem_slot(ChemFeature.PREVIOUS, p)] = chem_functions.previous_aa[:, p]
            features[:, chem_slot(ChemFeature.NEXT, p)] = chem_functions.next_aa[:, p]
            features[:, chem_slot(ChemFeature.SECOND_NEXT, p)] = chem_functions.second_next_aa[:, p]

            # Forward aggregates, then the complementary ones in the same
            # columns: only the complementary values remain. Trained models
            # depend on this, keep both writes.
            chem_sum = chem_functions.chem_sum[:, p]
            features[:, chem_slot(ChemFeature.SUM, p)] = chem_sum
            features[:, chem_slot(ChemFeature.SUM_NORMALIZED, p)] = chem_sum // forward_length
            features[:, chem_slot(ChemFeature.MAX, p)] = chem_functions.chem_max[:, p]
            features[:, chem_slot(ChemFeature.MIN, p)] = chem_functions.chem_min[:, p]

            chem_sum = chem_functions.chem_sum_complement[:, p]
            features[:, chem_slot(ChemFeature.SUM, p)] = chem_sum
            features[:, chem_slot(ChemFeature.SUM_NORMALIZED, p)] = chem_sum // complement_length
            features[:, chem_slot(ChemFeature.MAX, p)] = chem_functions.chem_max_complement[:, p]
            features[:, chem_slot(ChemFeature.MIN, p)] = chem_functions.chem_min_complement[:, p]

        # Residue mass statistics
        features[:, FeatureSlot.MASS_SUM] = _truncate(metrics.prefix_sum, dtype)
        features[:, FeatureSlot.MASS_SUM_NORMALIZED] = _truncate(
            metrics.prefix_sum / forward_length, dtype
        )
        features[:, FeatureSlot.MASS_MAX] = _truncate(metrics.prefix_max, dtype)
        features[:, FeatureSlot.MASS_MIN] = _truncate(metrics.prefix_min, dtype)
        features[:, FeatureSlot.COMPLEMENT_MASS_SUM] = _truncate(metrics.suffix_sum, dtype)
        features[:, FeatureSlot.COMPLEMENT_MASS_SUM_NORMALIZED] = _truncate(
            metrics.suffix_sum / complement_length, dtype
        )
        features[:, FeatureSlot.COMPLEMENT_MASS_MAX] = _truncate(metrics.suffix_max, dtype)
        features[:, FeatureSlot.COMPLEMENT_MASS_MIN] = _truncate(metrics.suffix_min, dtype)

        # Residue identities
        aa_indexes = AA_INDEX_ARRAY[peptide_ord]
        current_indexes, next_indexes = residue_cursor(
            aa_indexes, params.legacy_residue_cursor
        )
        features[:, FeatureSlot.FIRST_AA + aa_indexes[0]] = 1
        features[:, FeatureSlot.LAST_AA + aa_indexes[-1]] = 1
        features[sites, FeatureSlot.AA + current_indexes] = 1
        features[sites, FeatureSlot.NEXT_AA + next_indexes] = 1

        return features


def residue_cursor(aa_indexes: np.ndarray, legacy: bool = True):
    """Return the current and next residue index at every site.

    Parameters
    ----------
    aa_indexes : np.ndarray
        ms2pip index of every residue, length L
    legacy : bool
        Reproduce the lagging cursor of the original ms2pip port

    Returns
    -------
    current_indexes, next_indexes : np.ndarray
        Length L - 1

    Examples
    --------
    >>> residue_cursor(np.array([0, 1, 2, 3]))
    (array([0, 1, 1]), array([1, 1, 2]))
    """
    n_sites = len(aa_indexes) - 1
    if not legacy:
        return aa_indexes[:n_sites], aa_indexes[1:]

    # The next residue is read one step late from site 1 on, and the current
    # residue takes the previous value of the next one.
    next_indexes = aa_indexes[:n_sites].copy()
    next_indexes[0] = aa_indexes[1]
    current_indexes = np.empty_like(next_indexes)
    current_indexes[0] = aa_indexes[0]
    current_indexes[1:] = next_indexes[:-1]
    return current_indexes, next_indexes
