"""Resilience – exclusive lease pool for request channels."""
from provisioning_service.kernel.errors import PoolExhaustedError
from provisioning_service.resilience.pool.pool import LeasedResource, ResourceLeasePool

__all__ = ["LeasedResource", "PoolExhaustedError", "ResourceLeasePool"]
