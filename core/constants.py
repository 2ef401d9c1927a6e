"""Common constants shared across notifysetup modules."""

QUEUE_NAME = "foo_queue"
TOPIC_NAME = "foo_topic"

QUEUE_ATTRIBUTES = {
    "DelaySeconds": "60",
    "MessageRetentionPeriod": "86400",
}

DEFAULT_EVENTS = ("s3:ObjectCreated:*",)

POLICY_VERSION = "2008-10-17"
SUBSCRIPTION_PROTOCOL = "sqs"

REGION_ENV_VAR = "AWS_REGION"
