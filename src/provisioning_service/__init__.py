"""
provisioning_service – request/reply and sync commands for account provisioning.

Import path convention::

    from provisioning_service.kernel.errors import ProviderError
    from provisioning_service.kernel.messaging import Envelope, ReplyEnvelope
    from provisioning_service.application.commands import RequestCommand
    from provisioning_service.resilience.pool import ResourceLeasePool
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
