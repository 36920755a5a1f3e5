"""ms2pip fragmentation features.

This module provides:
- Amino acid chemical property and index tables
- Running residue mass metrics along a peptide (Numba)
- Running chemical property functions along a peptide (Numba)
- The 164-column feature layout
- b/y ion feature matrix generation
"""

from .properties import (
    AA_INDEXES,
    CHEMICAL_PROPERTIES,
    N_CHEM_PROPERTIES,
    N_IMPLEMENTED_AAS,
    properties_of,
    index_of,
    encode_peptide_to_ord,
)

from .metrics import (
    PeptideMetrics,
    compute_peptide_metrics,
)

from .chem import (
    PeptideChemFunctions,
    compute_chem_functions,
)

from .layout import (
    N_FEATURES,
    FeatureSlot,
    ChemFeature,
    chem_slot,
    one_hot_slot,
    feature_names,
)

from .generator import (
    FeaturesGenerator,
    FeaturesParams,
)

__all__ = [
    # Tables
    'AA_INDEXES',
    'CHEMICAL_PROPERTIES',
    'N_CHEM_PROPERTIES',
    'N_IMPLEMENTED_AAS',
    'properties_of',
    'index_of',
    'encode_peptide_to_ord',

    # Sequence functions
    'PeptideMetrics',
    'compute_peptide_metrics',
    'PeptideChemFunctions',
    'compute_chem_functions',

    # Layout
    'N_FEATURES',
    'FeatureSlot',
    'ChemFeature',
    'chem_slot',
    'one_hot_slot',
    'feature_names',

    # Generation
    'FeaturesGenerator',
    'FeaturesParams',
]
