"""Policy document helpers."""

from .documents import bucket_source_arn, queue_policy, statement_id, topic_policy

__all__ = ["bucket_source_arn", "queue_policy", "statement_id", "topic_policy"]
