"""Application builders – payload fragment to object."""
from provisioning_service.application.builders.builder import DataclassObjectBuilder, ObjectBuilder

__all__ = ["DataclassObjectBuilder", "ObjectBuilder"]
