"""Data models shared across the provisioning pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from core.constants import POLICY_VERSION
from core.errors import ProviderError


class PolicyStatement(BaseModel):
    """Resource policy statement granting one action under a source-ARN condition."""

    sid: str = Field(..., alias="Sid")
    effect: str = Field(default="Allow", alias="Effect")
    principal: dict[str, Any] = Field(default_factory=lambda: {"AWS": "*"}, alias="Principal")
    action: str = Field(..., alias="Action")
    resource: str = Field(..., alias="Resource")
    condition: dict[str, dict[str, str]] = Field(default_factory=dict, alias="Condition")

    model_config = {
        "populate_by_name": True,
    }


class PolicyDoc(BaseModel):
    """Access policy document attached to a queue or topic."""

    version: str = Field(default=POLICY_VERSION, alias="Version")
    id: str = Field(..., alias="Id")
    statements: list[PolicyStatement] = Field(default_factory=list, alias="Statement")

    model_config = {
        "populate_by_name": True,
    }

    def to_json(self) -> str:
        """Serialize with AWS field names, ready for a ``Policy`` attribute."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class TopicConfiguration(BaseModel):
    """One bucket event → topic mapping."""

    topic_arn: str = Field(..., alias="TopicArn")
    events: list[str] = Field(..., alias="Events")
    id: Optional[str] = Field(default=None, alias="Id")

    model_config = {
        "populate_by_name": True,
    }


class NotificationConfiguration(BaseModel):
    """Bucket notification configuration limited to topic targets."""

    topic_configurations: list[TopicConfiguration] = Field(default_factory=list, alias="TopicConfigurations")

    model_config = {
        "populate_by_name": True,
    }

    def to_request(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ProvisionState(str, Enum):
    """States of one provisioning run; ``Failed`` is reachable from any non-terminal state."""

    INIT = "Init"
    QUEUE_CREATED = "QueueCreated"
    QUEUE_ARN_RESOLVED = "QueueArnResolved"
    TOPIC_CREATED = "TopicCreated"
    SUBSCRIBED = "Subscribed"
    QUEUE_POLICY_APPLIED = "QueuePolicyApplied"
    TOPIC_POLICY_APPLIED = "TopicPolicyApplied"
    NOTIFICATION_REGISTERED = "NotificationRegistered"
    DONE = "Done"
    FAILED = "Failed"


@dataclass(slots=True)
class ProvisionResult:
    """Identifiers gathered during one provisioning run."""

    bucket_name: str
    state: ProvisionState = ProvisionState.INIT
    queue_url: str | None = None
    queue_arn: str | None = None
    topic_arn: str | None = None
    subscription: dict[str, Any] = field(default_factory=dict)
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        """True once every step has succeeded."""
        return self.state is ProvisionState.DONE

    def identifiers(self) -> dict[str, Any]:
        """Plain mapping of the gathered identifiers for CLI output."""
        return {
            "bucket": self.bucket_name,
            "queueUrl": self.queue_url,
            "queueArn": self.queue_arn,
            "topicArn": self.topic_arn,
            "subscription": self.subscription,
            "state": self.state.value,
        }


__all__ = [
    "NotificationConfiguration",
    "PolicyDoc",
    "PolicyStatement",
    "ProvisionResult",
    "ProvisionState",
    "TopicConfiguration",
]
