# beamcalc/errors.py
"""Error kinds raised by the analysis pipeline."""


class AnalysisError(RuntimeError):
    """Base class for failures surfaced by an analysis run."""

    kind = "AnalysisError"


class SingularSystemError(AnalysisError):
    """Raised when a reaction or stiffness system has a pivot below threshold."""

    kind = "SingularSystem"


class MissingRigidityError(AnalysisError):
    """Raised when the FEM path needs E·I but E or I is missing or zero."""

    kind = "MissingRigidity"


class MethodUnavailableError(AnalysisError):
    """Raised when a hyperstatic beam is analysed with FEM mode disabled."""

    kind = "MethodUnavailable"
