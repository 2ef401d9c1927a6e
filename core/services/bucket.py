"""S3 bucket notification registration."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import boto3

from core.constants import DEFAULT_EVENTS
from core.errors import PROVIDER_EXCEPTIONS, ProviderError
from core.models import NotificationConfiguration, TopicConfiguration

logger = logging.getLogger(__name__)


class BucketService:
    """Thin adapter over the S3 bucket notification API."""

    def __init__(self, client: Any | None = None) -> None:
        self._client = client or boto3.client("s3")

    def put_notification(
        self,
        bucket_name: str,
        topic_arn: str,
        events: Iterable[str] = DEFAULT_EVENTS,
    ) -> NotificationConfiguration:
        """Point the bucket's events at ``topic_arn``.

        The bucket's whole notification configuration is replaced, so any
        queue, topic or function targets configured earlier are dropped.
        """
        event_names = list(dict.fromkeys(events))
        if not event_names:
            raise ValueError("at least one event name is required")
        config = NotificationConfiguration(
            topic_configurations=[TopicConfiguration(topic_arn=topic_arn, events=event_names)],
        )
        try:
            self._client.put_bucket_notification_configuration(
                Bucket=bucket_name,
                NotificationConfiguration=config.to_request(),
            )
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "PutBucketNotificationConfiguration") from exc
        logger.info("bucket %s notifies %s on %s", bucket_name, topic_arn, ", ".join(event_names))
        return config


__all__ = ["BucketService"]
