"""Errors raised on invalid feature generation input.

All of them are caller errors: the input is rejected before any feature is
computed and no partial output is returned.
"""


class FeatureGenerationError(ValueError):
    """Base class for invalid peptide input."""


class SequenceTooShortError(FeatureGenerationError):
    """Peptide has fewer than two residues, hence no fragmentation site."""

    def __init__(self, sequence: str):
        self.sequence = sequence
        super().__init__(
            f"Peptide '{sequence}' has {len(sequence)} residue(s), "
            f"at least 2 are needed for a fragmentation site"
        )


class UnknownResidueError(FeatureGenerationError):
    """Residue outside the 20 amino acids implemented in ms2pip."""

    def __init__(self, residue: str, position: int = -1, sequence: str = ""):
        self.residue = residue
        self.position = position
        self.sequence = sequence
        if position >= 0:
            message = (
                f"Unknown residue '{residue}' at position {position} "
                f"of peptide '{sequence}'"
            )
        else:
            message = f"Unknown residue '{residue}'"
        super().__init__(message)


class InvalidModificationSiteError(FeatureGenerationError):
    """Modification site outside [1, peptide length]."""

    def __init__(self, site: int, sequence_length: int, name: str = ""):
        self.site = site
        self.sequence_length = sequence_length
        self.name = name
        super().__init__(
            f"Modification {name or '?'} at site {site} is outside "
            f"[1, {sequence_length}]"
        )


class UnknownModificationError(FeatureGenerationError):
    """Modification without explicit mass and missing from the mass lookup."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No mass known for modification '{name}'")
