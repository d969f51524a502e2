"""Application baseline – optimistic concurrency control."""
from provisioning_service.application.baseline.checker import (
    BaselineCheck,
    BaselineConflictChecker,
    BaselineOutcome,
)

__all__ = ["BaselineCheck", "BaselineConflictChecker", "BaselineOutcome"]
