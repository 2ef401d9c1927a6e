"""Core domain models and services for the bucket notification provisioner."""

from .errors import ProviderError
from .models import NotificationConfiguration, PolicyDoc, PolicyStatement, ProvisionResult, ProvisionState

__all__ = [
    "NotificationConfiguration",
    "PolicyDoc",
    "PolicyStatement",
    "ProviderError",
    "ProvisionResult",
    "ProvisionState",
]
