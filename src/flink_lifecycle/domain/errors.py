"""Domain exceptions raised at the service boundary.

The lifecycle decisions themselves never raise.
"""


class JobLifecycleError(Exception):
    """Base class for job lifecycle errors."""


class LifecycleValidationError(JobLifecycleError):
    """Raised when a decision request cannot be evaluated as given."""


__all__ = ["JobLifecycleError", "LifecycleValidationError"]
