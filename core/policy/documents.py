"""Build the access policy documents attached to the queue and the topic."""

from __future__ import annotations

import time

from core.models import PolicyDoc, PolicyStatement


def statement_id(now: float | None = None) -> str:
    """Return ``Sid<epoch-millis>``.

    Ids are only unique across calls at least one millisecond apart.
    """
    millis = time.time_ns() // 1_000_000 if now is None else int(now * 1000)
    return f"Sid{millis}"


def bucket_source_arn(bucket_name: str) -> str:
    """ARN pattern matching the bucket in any partition, region and account."""
    if not bucket_name:
        raise ValueError("bucket_name must not be empty")
    return f"arn:*:s3:*:*:{bucket_name}"


def queue_policy(queue_arn: str, topic_arn: str, now: float | None = None) -> PolicyDoc:
    """Allow the topic to deliver messages into the queue."""
    _require(queue_arn=queue_arn, topic_arn=topic_arn)
    statement = PolicyStatement(
        sid=statement_id(now),
        action="SQS:SendMessage",
        resource=queue_arn,
        condition={"ArnEquals": {"aws:SourceArn": topic_arn}},
    )
    return PolicyDoc(id=f"{queue_arn}/SQSDefaultPolicy", statements=[statement])


def topic_policy(topic_arn: str, bucket_name: str, now: float | None = None) -> PolicyDoc:
    """Allow the bucket to publish into the topic."""
    _require(topic_arn=topic_arn)
    statement = PolicyStatement(
        sid=statement_id(now),
        action="SNS:Publish",
        resource=topic_arn,
        condition={"ArnLike": {"aws:SourceArn": bucket_source_arn(bucket_name)}},
    )
    return PolicyDoc(id=f"{topic_arn}/SNSDefaultPolicy", statements=[statement])


def _require(**values: str) -> None:
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValueError(f"missing required identifiers: {', '.join(missing)}")


__all__ = ["bucket_source_arn", "queue_policy", "statement_id", "topic_policy"]
