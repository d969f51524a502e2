"""Application requests – synchronous request/reply client."""
from provisioning_service.application.requests.client import ExchangeResult, RequestReplyClient

__all__ = ["ExchangeResult", "RequestReplyClient"]
