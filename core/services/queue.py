"""SQS operations used by the provisioner."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import boto3

from core.constants import QUEUE_ATTRIBUTES
from core.errors import PROVIDER_EXCEPTIONS, ProviderError
from core.models import PolicyDoc
from core.policy.documents import queue_policy

logger = logging.getLogger(__name__)


class QueueService:
    """Thin adapter over the SQS management API."""

    def __init__(self, client: Any | None = None) -> None:
        self._client = client or boto3.client("sqs")

    def create_queue(self, name: str, attributes: Mapping[str, str] = QUEUE_ATTRIBUTES) -> str:
        """Create ``name`` and return its URL."""
        try:
            response = self._client.create_queue(QueueName=name, Attributes=dict(attributes))
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "CreateQueue") from exc
        queue_url = response["QueueUrl"]
        logger.info("queue_url=%s", queue_url)
        return queue_url

    def get_queue_arn(self, queue_url: str) -> str:
        try:
            response = self._client.get_queue_attributes(QueueUrl=queue_url, AttributeNames=["QueueArn"])
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "GetQueueAttributes") from exc
        queue_arn = response.get("Attributes", {}).get("QueueArn")
        if not queue_arn:
            raise ProviderError(f"no QueueArn returned for {queue_url}", operation="GetQueueAttributes")
        logger.info("queue_arn=%s", queue_arn)
        return queue_arn

    def set_queue_policy(self, queue_url: str, queue_arn: str, topic_arn: str) -> PolicyDoc:
        """Replace the queue policy with one letting ``topic_arn`` send messages."""
        policy = queue_policy(queue_arn, topic_arn)
        try:
            self._client.set_queue_attributes(QueueUrl=queue_url, Attributes={"Policy": policy.to_json()})
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "SetQueueAttributes") from exc
        logger.info("queue policy applied to %s (sid=%s)", queue_arn, policy.statements[0].sid)
        return policy

    # Lookup helpers -------------------------------------------------------
    def list_queues(self, prefix: str | None = None) -> list[str]:
        kwargs: dict[str, Any] = {}
        if prefix:
            kwargs["QueueNamePrefix"] = prefix
        try:
            response = self._client.list_queues(**kwargs)
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "ListQueues") from exc
        return list(response.get("QueueUrls", []))

    def get_queue_url(self, name: str) -> str:
        try:
            response = self._client.get_queue_url(QueueName=name)
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "GetQueueUrl") from exc
        return response["QueueUrl"]

    def delete_queue(self, queue_url: str) -> None:
        try:
            self._client.delete_queue(QueueUrl=queue_url)
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "DeleteQueue") from exc
        logger.info("deleted queue %s", queue_url)


__all__ = ["QueueService"]
