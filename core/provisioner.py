"""Sequence the provisioning steps from queue creation to bucket notification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable

import boto3

from core.constants import DEFAULT_EVENTS, QUEUE_NAME, TOPIC_NAME
from core.errors import ProviderError
from core.models import ProvisionResult, ProvisionState
from core.services.bucket import BucketService
from core.services.queue import QueueService
from core.services.topic import TopicService

if TYPE_CHECKING:  # pragma: no cover
    from cli.config import Settings

logger = logging.getLogger(__name__)

Step = Callable[[ProvisionResult], None]


class Provisioner:
    """Run the eight-state provisioning sequence against one bucket.

    States advance ``Init`` → ``QueueCreated`` → ... → ``NotificationRegistered``
    → ``Done``. The first :class:`ProviderError` moves the run to ``Failed``
    and the remaining steps are skipped. Resources created before the failure
    are left in place.
    """

    def __init__(
        self,
        queues: QueueService,
        topics: TopicService,
        buckets: BucketService,
        *,
        queue_name: str = QUEUE_NAME,
        topic_name: str = TOPIC_NAME,
        events: Iterable[str] = DEFAULT_EVENTS,
    ) -> None:
        self.queues = queues
        self.topics = topics
        self.buckets = buckets
        self.queue_name = queue_name
        self.topic_name = topic_name
        self.events = tuple(events)

    @classmethod
    def from_settings(cls, settings: "Settings", session: Any | None = None) -> "Provisioner":
        session = session or boto3.Session(region_name=settings.region_name)
        return cls(
            QueueService(session.client("sqs")),
            TopicService(session.client("sns")),
            BucketService(session.client("s3")),
            queue_name=settings.queue_name,
            topic_name=settings.topic_name,
            events=settings.events,
        )

    def run(self, bucket_name: str) -> ProvisionResult:
        result = ProvisionResult(bucket_name=bucket_name)
        if not bucket_name or not bucket_name.strip():
            result.error = ProviderError("bucket name must not be empty", code="InvalidBucketName")
            result.state = ProvisionState.FAILED
            logger.error("provisioning not started: %s", result.error)
            return result
        logger.info("provisioning notifications for bucket %s", bucket_name)

        for step, reached in self._steps():
            try:
                step(result)
            except ProviderError as exc:
                logger.error("provisioning stopped in state %s: %s", result.state.value, exc)
                result.error = exc
                result.state = ProvisionState.FAILED
                return result
            result.state = reached
            logger.debug("state=%s", reached.value)

        result.state = ProvisionState.DONE
        return result

    # ------------------------------------------------------------------
    def _steps(self) -> list[tuple[Step, ProvisionState]]:
        return [
            (self._create_queue, ProvisionState.QUEUE_CREATED),
            (self._resolve_queue_arn, ProvisionState.QUEUE_ARN_RESOLVED),
            (self._create_topic, ProvisionState.TOPIC_CREATED),
            (self._subscribe, ProvisionState.SUBSCRIBED),
            (self._apply_queue_policy, ProvisionState.QUEUE_POLICY_APPLIED),
            (self._apply_topic_policy, ProvisionState.TOPIC_POLICY_APPLIED),
            (self._register_notification, ProvisionState.NOTIFICATION_REGISTERED),
        ]

    def _create_queue(self, result: ProvisionResult) -> None:
        result.queue_url = self.queues.create_queue(self.queue_name)

    def _resolve_queue_arn(self, result: ProvisionResult) -> None:
        result.queue_arn = self.queues.get_queue_arn(result.queue_url)

    def _create_topic(self, result: ProvisionResult) -> None:
        result.topic_arn = self.topics.create_topic(self.topic_name)

    def _subscribe(self, result: ProvisionResult) -> None:
        result.subscription = self.topics.subscribe(result.topic_arn, result.queue_arn)

    def _apply_queue_policy(self, result: ProvisionResult) -> None:
        self.queues.set_queue_policy(result.queue_url, result.queue_arn, result.topic_arn)

    def _apply_topic_policy(self, result: ProvisionResult) -> None:
        self.topics.set_topic_policy(result.topic_arn, result.bucket_name)

    def _register_notification(self, result: ProvisionResult) -> None:
        self.buckets.put_notification(result.bucket_name, result.topic_arn, self.events)


def run(bucket_name: str, settings: "Settings", session: Any | None = None) -> ProvisionResult:
    """Provision the pipeline for ``bucket_name`` using clients built from ``settings``."""
    return Provisioner.from_settings(settings, session=session).run(bucket_name)


__all__ = ["Provisioner", "run"]
