"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   ├── MalformedRequestError
    │   ├── ValidationError
    │   │   ├── UnsupportedMessageObjectError
    │   │   ├── UnsupportedMessageActionError
    │   │   └── InvalidAuthUserIdError
    │   ├── BaselineStaleError
    │   ├── BaselineConflictError
    │   ├── NoOpUpdateError
    │   └── AmbiguousBaselineError       (system)
    ├── ApplicationError                 (application.py)
    │   ├── ProviderError
    │   │   └── UnsupportedProviderOperationError
    │   └── CommandError                 (system)
    └── InfrastructureError              (infrastructure.py, system)
        ├── PoolExhaustedError
        ├── QueryFailedError
        ├── RequestFailedError
        └── PublishFailedError
"""

from provisioning_service.kernel.errors.application import (
    ApplicationError,
    CommandError,
    ProviderError,
    UnsupportedProviderOperationError,
)
from provisioning_service.kernel.errors.base import BaseError, ErrorType
from provisioning_service.kernel.errors.domain import (
    AmbiguousBaselineError,
    BaselineConflictError,
    BaselineStaleError,
    DomainError,
    InvalidAuthUserIdError,
    MalformedRequestError,
    NoOpUpdateError,
    UnsupportedMessageActionError,
    UnsupportedMessageObjectError,
    ValidationError,
)
from provisioning_service.kernel.errors.infrastructure import (
    InfrastructureError,
    PoolExhaustedError,
    PublishFailedError,
    QueryFailedError,
    RequestFailedError,
)

__all__ = [
    "AmbiguousBaselineError",
    "ApplicationError",
    "BaseError",
    "BaselineConflictError",
    "BaselineStaleError",
    "CommandError",
    "DomainError",
    "ErrorType",
    "InfrastructureError",
    "InvalidAuthUserIdError",
    "MalformedRequestError",
    "NoOpUpdateError",
    "PoolExhaustedError",
    "ProviderError",
    "PublishFailedError",
    "QueryFailedError",
    "RequestFailedError",
    "UnsupportedMessageActionError",
    "UnsupportedMessageObjectError",
    "UnsupportedProviderOperationError",
    "ValidationError",
]
