"""SNS operations used by the provisioner."""

from __future__ import annotations

import logging
from typing import Any

import boto3

from core.constants import SUBSCRIPTION_PROTOCOL
from core.errors import PROVIDER_EXCEPTIONS, ProviderError
from core.models import PolicyDoc
from core.policy.documents import topic_policy

logger = logging.getLogger(__name__)


class TopicService:
    """Thin adapter over the SNS management API."""

    def __init__(self, client: Any | None = None) -> None:
        self._client = client or boto3.client("sns")

    def create_topic(self, name: str) -> str:
        try:
            response = self._client.create_topic(Name=name)
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "CreateTopic") from exc
        topic_arn = response["TopicArn"]
        logger.info("topic_arn=%s", topic_arn)
        return topic_arn

    def subscribe(self, topic_arn: str, queue_arn: str) -> dict[str, Any]:
        """Subscribe the queue to the topic and return the raw provider payload."""
        try:
            response = self._client.subscribe(
                TopicArn=topic_arn,
                Protocol=SUBSCRIPTION_PROTOCOL,
                Endpoint=queue_arn,
            )
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "Subscribe") from exc
        payload = {key: value for key, value in response.items() if key != "ResponseMetadata"}
        logger.info("subscribe_result=%s", payload)
        return payload

    def set_topic_policy(self, topic_arn: str, bucket_name: str) -> PolicyDoc:
        """Replace the topic policy with one letting ``bucket_name`` publish."""
        policy = topic_policy(topic_arn, bucket_name)
        try:
            self._client.set_topic_attributes(
                TopicArn=topic_arn,
                AttributeName="Policy",
                AttributeValue=policy.to_json(),
            )
        except PROVIDER_EXCEPTIONS as exc:
            raise ProviderError.from_exception(exc, "SetTopicAttributes") from exc
        logger.info("topic policy applied to %s (sid=%s)", topic_arn, policy.statements[0].sid)
        return policy


__all__ = ["TopicService"]
