"""AWS service adapters."""

from .bucket import BucketService
from .queue import QueueService
from .topic import TopicService

__all__ = ["BucketService", "QueueService", "TopicService"]
