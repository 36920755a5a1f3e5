"""Modification assignments for feature generation.

A modification is assigned to a 1-based residue site, following the
proteomics convention used by search engines and modification strings.
Several modifications may target the same site; their masses add up.

Examples
--------
>>> mods = parse_modifications("Oxidation@M;Phospho@S", "3;5")
>>> mods
[ModificationMatch(site=3, name='Oxidation', mass=None), ModificationMatch(site=5, name='Phospho', mass=None)]

>>> # Per-residue modification masses, 0-based
>>> modification_mass_array(mods, 6, MODIFICATION_MASSES)
array([ 0.      ,  0.      , 15.994915,  0.      , 79.966331,  0.      ])

>>> # Same modifications seen from the C-terminus (y ions)
>>> reverse_modifications(mods, 6)
[ModificationMatch(site=4, name='Oxidation', mass=None), ModificationMatch(site=2, name='Phospho', mass=None)]
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

import numpy as np

from .constants import MODIFICATION_MASSES
from .exceptions import InvalidModificationSiteError, UnknownModificationError

logger = logging.getLogger(__name__)


class ModificationMatch(NamedTuple):
    """A modification assigned to a peptide residue.

    ``site`` is 1-based. ``mass`` is the mass shift in Da; when None it is
    looked up by ``name`` in the modification mass table.
    """

    site: int
    name: str
    mass: Optional[float] = None


def as_modification_matches(modifications: Optional[Iterable]) -> List[ModificationMatch]:
    """Normalize modifications to a list of ModificationMatch.

    Accepts ModificationMatch instances as well as plain ``(site, name)`` or
    ``(site, name, mass)`` tuples. None means no modification.
    """
    if not modifications:
        return []
    return [
        modification if isinstance(modification, ModificationMatch)
        else ModificationMatch(*modification)
        for modification in modifications
    ]


# =============================================================================
# Modification Parsing
# =============================================================================

def parse_modifications(mods: str, mod_sites: str) -> List[ModificationMatch]:
    """Parse modification strings into ModificationMatch records.

    Parameters
    ----------
    mods : str
        Modification string, e.g., "Carbamidomethyl@C;Oxidation@M"
        Multiple modifications separated by semicolons
    mod_sites : str
        Modification sites (1-based positions), e.g., "3;6"
        Multiple sites separated by semicolons

    Returns
    -------
    List[ModificationMatch]
        One record per modification, sites kept 1-based, mass left to the
        lookup (None)

    Examples
    --------
    >>> parse_modifications("Carbamidomethyl@C", "3")
    [ModificationMatch(site=3, name='Carbamidomethyl', mass=None)]

    >>> parse_modifications("", "")
    []

    Notes
    -----
    - Handles byte strings (from pandas/numpy)
    - Malformed entries (no '@', non-numeric site) are skipped with a warning;
      sites are range-checked later against the peptide
    """
    if not mods:
        return []

    mod_list = mods.split(";")
    site_list = str(mod_sites).split(";")

    result = []
    for mod, site in zip(mod_list, site_list):
        mod = mod.strip()
        site = site.strip()

        # Handle byte strings from pandas/numpy
        if site.startswith("b'") and site.endswith("'"):
            site = site[2:-1]

        if "@" in mod and site.isdigit():
            result.append(ModificationMatch(int(site), mod.split("@")[0]))
        else:
            logger.warning(f"Skipping malformed modification '{mod}' at site '{site}'")

    return result


# =============================================================================
# Mass Resolution
# =============================================================================

def resolve_modification_mass(
    modification: ModificationMatch,
    modification_masses: Dict[str, float] = MODIFICATION_MASSES,
) -> float:
    """Return the mass shift of a modification.

    Raises
    ------
    UnknownModificationError
        If the modification has no explicit mass and its name is not in
        ``modification_masses``
    """
    if modification.mass is not None:
        return float(modification.mass)
    try:
        return modification_masses[modification.name]
    except KeyError:
        raise UnknownModificationError(modification.name) from None


def validate_modification_sites(
    modifications: List[ModificationMatch],
    sequence_length: int,
) -> None:
    """Check that every site lies in [1, sequence_length].

    Raises
    ------
    InvalidModificationSiteError
        On the first out-of-range site
    """
    for modification in modifications:
        if not 1 <= modification.site <= sequence_length:
            raise InvalidModificationSiteError(
                modification.site, sequence_length, modification.name
            )


def reverse_modifications(
    modifications: List[ModificationMatch],
    sequence_length: int,
) -> List[ModificationMatch]:
    """Remap modification sites onto the reversed sequence.

    Site s of a peptide of length L becomes site L - s + 1, so that the
    reversed sequence carries the same modified residues.
    """
    return [
        modification._replace(site=sequence_length - modification.site + 1)
        for modification in modifications
    ]


def modification_mass_array(
    modifications: List[ModificationMatch],
    sequence_length: int,
    modification_masses: Dict[str, float] = MODIFICATION_MASSES,
) -> np.ndarray:
    """Sum modification masses per residue.

    Returns
    -------
    np.ndarray (float64)
        Array of length ``sequence_length``; entry i holds the summed mass of
        the modifications at 1-based site i + 1, 0.0 where unmodified

    Raises
    ------
    InvalidModificationSiteError, UnknownModificationError
    """
    validate_modification_sites(modifications, sequence_length)

    masses = np.zeros(sequence_length, dtype=np.float64)
    for modification in modifications:
        masses[modification.site - 1] += resolve_modification_mass(
            modification, modification_masses
        )
    return masses
