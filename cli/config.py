"""Configuration loader for the notifysetup CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from core.constants import DEFAULT_EVENTS, QUEUE_NAME, REGION_ENV_VAR, TOPIC_NAME

DEFAULTS = {
    "region_name": None,
    "queue_name": QUEUE_NAME,
    "topic_name": TOPIC_NAME,
    "events": DEFAULT_EVENTS,
    "default_format": "json",
}


@dataclass(slots=True)
class Settings:
    region_name: str | None = DEFAULTS["region_name"]
    queue_name: str = DEFAULTS["queue_name"]
    topic_name: str = DEFAULTS["topic_name"]
    events: tuple[str, ...] = DEFAULTS["events"]
    default_format: str = DEFAULTS["default_format"]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        region = data.get(REGION_ENV_VAR) or data.get("AWS_DEFAULT_REGION") or DEFAULTS["region_name"]
        return cls(region_name=region)

    def merge_cli(self, format_override: str | None = None) -> "Settings":
        return Settings(
            region_name=self.region_name,
            queue_name=self.queue_name,
            topic_name=self.topic_name,
            events=self.events,
            default_format=format_override or self.default_format,
        )


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from the environment; an unset region defers to boto3's resolution chain."""
    return Settings.from_mapping(os.environ if environ is None else environ)


__all__ = ["Settings", "load_settings"]
