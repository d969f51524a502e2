"""Kernel domain building blocks – records and query specifications."""
from provisioning_service.kernel.ddd.record import Authentication, Record
from provisioning_service.kernel.ddd.specification import QuerySpecification

__all__ = ["Authentication", "QuerySpecification", "Record"]
