"""Application sync – sync-event publication."""
from provisioning_service.application.sync.publisher import PublishFailurePolicy, SyncPublisher

__all__ = ["PublishFailurePolicy", "SyncPublisher"]
