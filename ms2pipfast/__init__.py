"""ms2pipfast - ms2pip fragmentation features for peptides.

Computes the fixed-width integer feature vectors fed to ms2pip fragment
intensity models: one 164-column row per fragmentation site, for b ions
(N-terminal anchored) and y ions (C-terminal anchored).

The running aggregates along the sequence are Numba-compiled; validation,
modification handling and feature assembly are plain Python/NumPy.
"""

__version__ = "0.1.0"

from ms2pipfast import features
from ms2pipfast import modifications
from ms2pipfast.exceptions import (
    FeatureGenerationError,
    SequenceTooShortError,
    UnknownResidueError,
    InvalidModificationSiteError,
    UnknownModificationError,
)
from ms2pipfast.features import (
    FeaturesGenerator,
    FeaturesParams,
    N_FEATURES,
)
from ms2pipfast.convenience import (
    compute_features,
    compute_features_batch,
)

__all__ = [
    "features",
    "modifications",
    "FeatureGenerationError",
    "SequenceTooShortError",
    "UnknownResidueError",
    "InvalidModificationSiteError",
    "UnknownModificationError",
    "FeaturesGenerator",
    "FeaturesParams",
    "N_FEATURES",
    "compute_features",
    "compute_features_batch",
]
