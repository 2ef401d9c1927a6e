"""In-memory fakes for the SQS, SNS and S3 clients."""

from __future__ import annotations

import itertools
from typing import Any

import pytest
from botocore.exceptions import ClientError

ACCOUNT_ID = "123456789012"
REGION = "us-east-1"


def client_error(code: str, operation: str, message: str = "simulated failure") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class _FakeClient:
    def __init__(self, calls: list[str], failures: dict[str, str]) -> None:
        self.calls = calls
        self.failures = failures

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        code = self.failures.get(operation)
        if code:
            raise client_error(code, operation)


class FakeSqs(_FakeClient):
    def __init__(self, calls: list[str], failures: dict[str, str]) -> None:
        super().__init__(calls, failures)
        self.queues: dict[str, dict[str, str]] = {}

    @staticmethod
    def _url(name: str) -> str:
        return f"https://sqs.{REGION}.amazonaws.com/{ACCOUNT_ID}/{name}"

    def _name(self, url: str, operation: str) -> str:
        name = url.rsplit("/", 1)[-1]
        if name not in self.queues or self._url(name) != url:
            raise client_error("AWS.SimpleQueueService.NonExistentQueue", operation, "The specified queue does not exist.")
        return name

    def create_queue(self, QueueName: str, Attributes: dict[str, str] | None = None) -> dict[str, Any]:  # noqa: N803
        self._record("CreateQueue")
        attributes = dict(Attributes or {})
        existing = self.queues.get(QueueName)
        if existing is not None:
            if any(existing.get(key) != value for key, value in attributes.items()):
                raise client_error("QueueAlreadyExists", "CreateQueue")
        else:
            attributes["QueueArn"] = f"arn:aws:sqs:{REGION}:{ACCOUNT_ID}:{QueueName}"
            self.queues[QueueName] = attributes
        return {"QueueUrl": self._url(QueueName)}

    def get_queue_attributes(self, QueueUrl: str, AttributeNames: list[str]) -> dict[str, Any]:  # noqa: N803
        self._record("GetQueueAttributes")
        queue = self.queues[self._name(QueueUrl, "GetQueueAttributes")]
        return {"Attributes": {name: queue[name] for name in AttributeNames if name in queue}}

    def set_queue_attributes(self, QueueUrl: str, Attributes: dict[str, str]) -> dict[str, Any]:  # noqa: N803
        self._record("SetQueueAttributes")
        self.queues[self._name(QueueUrl, "SetQueueAttributes")].update(Attributes)
        return {}

    def list_queues(self, QueueNamePrefix: str = "") -> dict[str, Any]:  # noqa: N803
        self._record("ListQueues")
        urls = [self._url(name) for name in sorted(self.queues) if name.startswith(QueueNamePrefix)]
        return {"QueueUrls": urls} if urls else {}

    def get_queue_url(self, QueueName: str) -> dict[str, Any]:  # noqa: N803
        self._record("GetQueueUrl")
        if QueueName not in self.queues:
            raise client_error("AWS.SimpleQueueService.NonExistentQueue", "GetQueueUrl")
        return {"QueueUrl": self._url(QueueName)}

    def delete_queue(self, QueueUrl: str) -> dict[str, Any]:  # noqa: N803
        self._record("DeleteQueue")
        del self.queues[self._name(QueueUrl, "DeleteQueue")]
        return {}


class FakeSns(_FakeClient):
    def __init__(self, calls: list[str], failures: dict[str, str]) -> None:
        super().__init__(calls, failures)
        self.topics: dict[str, dict[str, str]] = {}
        self.subscriptions: list[dict[str, str]] = []
        self._ids = itertools.count(1)

    def create_topic(self, Name: str) -> dict[str, Any]:  # noqa: N803
        self._record("CreateTopic")
        arn = f"arn:aws:sns:{REGION}:{ACCOUNT_ID}:{Name}"
        self.topics.setdefault(arn, {})
        return {"TopicArn": arn, "ResponseMetadata": {"HTTPStatusCode": 200}}

    def subscribe(self, TopicArn: str, Protocol: str, Endpoint: str) -> dict[str, Any]:  # noqa: N803
        self._record("Subscribe")
        if TopicArn not in self.topics:
            raise client_error("NotFound", "Subscribe", "Topic does not exist")
        subscription_arn = f"{TopicArn}:sub-{next(self._ids)}"
        self.subscriptions.append(
            {"TopicArn": TopicArn, "Protocol": Protocol, "Endpoint": Endpoint, "SubscriptionArn": subscription_arn}
        )
        return {"SubscriptionArn": subscription_arn, "ResponseMetadata": {"HTTPStatusCode": 200}}

    def set_topic_attributes(self, TopicArn: str, AttributeName: str, AttributeValue: str) -> dict[str, Any]:  # noqa: N803
        self._record("SetTopicAttributes")
        if TopicArn not in self.topics:
            raise client_error("NotFound", "SetTopicAttributes", "Topic does not exist")
        self.topics[TopicArn][AttributeName] = AttributeValue
        return {}


class FakeS3(_FakeClient):
    def __init__(self, calls: list[str], failures: dict[str, str], buckets: set[str]) -> None:
        super().__init__(calls, failures)
        self.buckets = buckets
        self.notifications: dict[str, dict[str, Any]] = {}

    def put_bucket_notification_configuration(self, Bucket: str, NotificationConfiguration: dict[str, Any]) -> dict[str, Any]:  # noqa: N803
        self._record("PutBucketNotificationConfiguration")
        if Bucket not in self.buckets:
            raise client_error("NoSuchBucket", "PutBucketNotificationConfiguration", "The specified bucket does not exist")
        self.notifications[Bucket] = NotificationConfiguration
        return {}


class FakeSession:
    """Stands in for ``boto3.Session`` and hands out shared fake clients."""

    def __init__(self, buckets: set[str] | None = None) -> None:
        self.calls: list[str] = []
        self.failures: dict[str, str] = {}
        self.clients_created: list[str] = []
        self.sqs = FakeSqs(self.calls, self.failures)
        self.sns = FakeSns(self.calls, self.failures)
        self.s3 = FakeS3(self.calls, self.failures, set(buckets or ()))

    def fail(self, operation: str, code: str = "AccessDenied") -> None:
        self.failures[operation] = code

    def client(self, service_name: str, **_: Any) -> _FakeClient:
        self.clients_created.append(service_name)
        return {"sqs": self.sqs, "sns": self.sns, "s3": self.s3}[service_name]


@pytest.fixture
def aws() -> FakeSession:
    return FakeSession(buckets={"my-bucket"})
