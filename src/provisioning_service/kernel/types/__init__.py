"""Kernel types – Result monad and control-area value objects."""
from provisioning_service.kernel.types.auth_user_id import AuthUserId
from provisioning_service.kernel.types.result import Err, Ok, Result, attempt

__all__ = ["AuthUserId", "Err", "Ok", "Result", "attempt"]
