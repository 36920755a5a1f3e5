"""Amino acid chemical properties and ms2pip residue indexes.

Two fixed tables, built once at import and never mutated:

- ``CHEMICAL_PROPERTIES``: residue -> 4 integer property scores (0-100)
- ``AA_INDEXES``: residue -> ms2pip ordinal 0..19, used for one-hot encoding

Both are also provided as ord()-indexed arrays (``CHEM_PROPERTIES``,
``AA_INDEX_ARRAY``) so that an encoded peptide can be mapped with a single
fancy-indexing operation.

Notes
-----
The ms2pip property table lists three extra entries for residues it does not
implement yet, all under the same placeholder key '?'. Only the last of them
survives in the mapping. The table is kept as is because trained models were
built against it; '?' is in any case rejected by ``properties_of`` since it is
not one of the 20 implemented residues.
"""

from typing import Tuple

import numpy as np

from ..exceptions import SequenceTooShortError, UnknownResidueError

# Number of amino acids implemented in ms2pip
N_IMPLEMENTED_AAS = 20

# Number of chemical properties per amino acid
N_CHEM_PROPERTIES = 4

# =============================================================================
# ms2pip Residue Indexes
# =============================================================================

AA_INDEXES = {
    'A': 0,
    'C': 1,
    'D': 2,
    'E': 3,
    'F': 4,
    'G': 5,
    'H': 6,
    'I': 7,
    'K': 8,
    'L': 9,
    'M': 10,
    'N': 11,
    'P': 12,
    'Q': 13,
    'R': 14,
    'S': 15,
    'T': 16,
    'V': 17,
    'W': 18,
    'Y': 19,
}

# =============================================================================
# Chemical Properties
# =============================================================================

# TODO: add the properties of modified residues
CHEMICAL_PROPERTIES = {
    'A': (10, 51, 93, 40),
    'C': (23, 18, 49, 100),
    'D': (10, 75, 31, 28),
    'E': (14, 25, 45, 0),
    'F': (37, 35, 39, 5),
    'G': (27, 100, 95, 33),
    'H': (0, 16, 79, 40),
    'I': (61, 3, 56, 60),
    'K': (23, 94, 100, 40),
    'L': (55, 0, 43, 87),
    'M': (20, 97, 98, 40),
    'N': (30, 82, 90, 37),
    'P': (29, 12, 52, 33),
    'Q': (34, 0, 0, 44),
    'R': (33, 22, 54, 36),
    'S': (100, 22, 53, 100),
    'T': (14, 21, 60, 36),
    'V': (26, 39, 72, 35),
    'W': (17, 80, 97, 39),
    'Y': (39, 98, 69, 39),
}

# Unimplemented residues, all keyed '?': each assignment overwrites the
# previous one and only (35, 28, 47, 40) remains.
CHEMICAL_PROPERTIES['?'] = (21, 95, 100, 40)
CHEMICAL_PROPERTIES['?'] = (30, 70, 75, 36)
CHEMICAL_PROPERTIES['?'] = (35, 28, 47, 40)

# =============================================================================
# ord()-Indexed Arrays
# =============================================================================

# Access via: CHEM_PROPERTIES[ord('A')] -> array([10, 51, 93, 40])
CHEM_PROPERTIES = np.zeros((256, N_CHEM_PROPERTIES), dtype=np.int64)
for aa in AA_INDEXES:
    CHEM_PROPERTIES[ord(aa)] = CHEMICAL_PROPERTIES[aa]

# -1 marks residues outside the implemented alphabet
AA_INDEX_ARRAY = np.full(256, -1, dtype=np.int64)
for aa, index in AA_INDEXES.items():
    AA_INDEX_ARRAY[ord(aa)] = index

CHEM_PROPERTIES.setflags(write=False)
AA_INDEX_ARRAY.setflags(write=False)


# =============================================================================
# Lookups
# =============================================================================

def properties_of(residue: str) -> Tuple[int, int, int, int]:
    """Return the 4 chemical property scores of a residue.

    Raises
    ------
    UnknownResidueError
        If the residue is not one of the 20 implemented amino acids
    """
    if residue not in AA_INDEXES:
        raise UnknownResidueError(residue)
    return CHEMICAL_PROPERTIES[residue]


def index_of(residue: str) -> int:
    """Return the ms2pip index (0..19) of a residue.

    Raises
    ------
    UnknownResidueError
        If the residue is not one of the 20 implemented amino acids
    """
    try:
        return AA_INDEXES[residue]
    except KeyError:
        raise UnknownResidueError(residue) from None


def encode_peptide_to_ord(peptide: str) -> np.ndarray:
    """Validate a peptide and encode it to an ord() array.

    Parameters
    ----------
    peptide : str
        Peptide sequence over the 20 implemented amino acids

    Returns
    -------
    peptide_ord : np.ndarray (uint8)
        Array of ord() values for each amino acid

    Raises
    ------
    SequenceTooShortError
        If the peptide has fewer than 2 residues
    UnknownResidueError
        If a residue is not one of the 20 implemented amino acids

    Examples
    --------
    >>> encode_peptide_to_ord("PEPTIDE")
    array([80, 69, 80, 84, 73, 68, 69], dtype=uint8)
    """
    if len(peptide) < 2:
        raise SequenceTooShortError(peptide)
    for position, aa in enumerate(peptide):
        if aa not in AA_INDEXES:
            raise UnknownResidueError(aa, position, peptide)
    return np.array([ord(aa) for aa in peptide], dtype=np.uint8)
