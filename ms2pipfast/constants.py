"""Residue and modification masses used by the feature generator.

These tables are the default lookups injected into the sequence metrics
computer (see ``FeaturesParams``). They are plain dictionaries so that callers
can copy and extend them, e.g. with custom modifications, without touching
module state.

Sources
-------
- IUPAC amino acid masses: https://www.unimod.org/masses.html
- Unimod modification masses: https://www.unimod.org/modifications_list.php
"""

# =============================================================================
# Amino Acid Monoisotopic Masses (Da)
# =============================================================================

# Standard 20 amino acids (unmodified residues, no termini)
# Non-standard codes (X, B, Z, J, U, O) are deliberately absent: ms2pip only
# implements the 20 standard residues.
AA_MASSES_DICT = {
    'A': 71.037114,   # Alanine
    'R': 156.101111,  # Arginine
    'N': 114.042927,  # Asparagine
    'D': 115.026943,  # Aspartic acid
    'C': 103.009185,  # Cysteine (unmodified)
    'E': 129.042593,  # Glutamic acid
    'Q': 128.058578,  # Glutamine
    'G': 57.021464,   # Glycine
    'H': 137.058912,  # Histidine
    'I': 113.084064,  # Isoleucine
    'L': 113.084064,  # Leucine
    'K': 128.094963,  # Lysine
    'M': 131.040485,  # Methionine
    'F': 147.068414,  # Phenylalanine
    'P': 97.052764,   # Proline
    'S': 87.032028,   # Serine
    'T': 101.047679,  # Threonine
    'W': 186.079313,  # Tryptophan
    'Y': 163.063320,  # Tyrosine
    'V': 99.068414,   # Valine
}

# =============================================================================
# Common Modification Masses
# =============================================================================

# Carbamidomethylation of Cysteine (Unimod:4)
# C2H3NO: 57.021464 Da
CARBAMIDOMETHYL_MASS = 57.021464

# Oxidation of Methionine (Unimod:35)
# O: 15.994915 Da
OXIDATION_MASS = 15.994915

# Acetylation (Protein N-term, Unimod:1)
# C2H2O: 42.010565 Da
ACETYL_MASS = 42.010565

# Phosphorylation (Unimod:21)
# HPO3: 79.966331 Da
PHOSPHO_MASS = 79.966331

# Deamidation (Unimod:7)
# NH -> O: 0.984016 Da
DEAMIDATION_MASS = 0.984016

# Name -> mass lookup, keyed by the names used in modification strings
# ("Oxidation@M" -> "Oxidation")
MODIFICATION_MASSES = {
    'Carbamidomethyl': CARBAMIDOMETHYL_MASS,
    'Oxidation': OXIDATION_MASS,
    'Acetyl': ACETYL_MASS,
    'Phospho': PHOSPHO_MASS,
    'Deamidation': DEAMIDATION_MASS,
}


# =============================================================================
# Mass Table Validation
# =============================================================================

def validate_constants():
    """Validate that the mass tables are physically reasonable.

    Raises AssertionError if any mass is out of the expected range.
    This is a sanity check to catch copy-paste errors or typos.
    """
    assert len(AA_MASSES_DICT) == 20, \
        f"Expected 20 residues, found {len(AA_MASSES_DICT)}"

    # Glycine is the lightest residue, tryptophan the heaviest
    for aa, mass in AA_MASSES_DICT.items():
        assert 50.0 < mass < 250.0, f"AA {aa} mass is out of range: {mass}"

    # Leucine and isoleucine are isobaric
    assert AA_MASSES_DICT['L'] == AA_MASSES_DICT['I']

    for name, mass in MODIFICATION_MASSES.items():
        assert 0.0 < mass < 100.0, f"Modification {name} mass is out of range: {mass}"
