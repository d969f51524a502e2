"""Application builders – ObjectBuilder port, DataclassObjectBuilder."""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, TypeVar

from provisioning_service.kernel.errors import BaseError, MalformedRequestError
from provisioning_service.kernel.types import Err, Ok, Result

T = TypeVar("T")


class ObjectBuilder(abc.ABC):
    """Port: turn a payload fragment into a typed object."""

    @abc.abstractmethod
    def build(self, fragment: Any, target: type[T], *, element: str) -> Result[T, MalformedRequestError]: ...


class DataclassObjectBuilder(ObjectBuilder):
    """Build dataclass objects from mapping fragments.

    A fragment that already is an instance of *target* is passed through.
    A missing fragment, a non-mapping fragment, or a mapping that does not fit
    the dataclass fields yields ``Err(MalformedRequestError)``.
    """

    def build(self, fragment: Any, target: type[T], *, element: str) -> Result[T, MalformedRequestError]:
        if fragment is None:
            return Err(
                MalformedRequestError(
                    f"Invalid element found in the message. This command expects a {target.__name__} "
                    f"in {element}",
                    element=element,
                )
            )
        if isinstance(fragment, target):
            return Ok(fragment)
        if not isinstance(fragment, Mapping):
            return Err(
                MalformedRequestError(
                    f"{element} must be a mapping, got {type(fragment).__name__}",
                    element=element,
                )
            )
        try:
            return Ok(target(**fragment))
        except (TypeError, ValueError, BaseError) as exc:
            return Err(
                MalformedRequestError(
                    f"An error occurred building the {target.__name__} object from {element}. "
                    f"The exception is: {exc}",
                    element=element,
                    cause=exc,
                )
            )


__all__ = ["DataclassObjectBuilder", "ObjectBuilder"]
