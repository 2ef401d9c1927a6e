"""Error types raised by the provisioning services."""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError


class ProviderError(RuntimeError):
    """A remote management call failed.

    Wraps whatever the AWS API returned so callers only ever deal with one
    error kind. ``code`` is the provider error code (``QueueAlreadyExists``,
    ``NoSuchBucket``...) and ``operation`` the API operation that failed.
    """

    def __init__(self, message: str, code: str | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.operation = operation

    def __str__(self) -> str:
        prefix = f"{self.operation} failed" if self.operation else "request failed"
        if self.code:
            prefix = f"{prefix} ({self.code})"
        return f"{prefix}: {self.message}"

    @classmethod
    def from_client_error(cls, exc: ClientError, operation: str | None = None) -> "ProviderError":
        error = exc.response.get("Error", {})
        return cls(
            error.get("Message") or str(exc),
            code=error.get("Code"),
            operation=operation or getattr(exc, "operation_name", None),
        )

    @classmethod
    def from_exception(cls, exc: Exception, operation: str) -> "ProviderError":
        if isinstance(exc, ClientError):
            return cls.from_client_error(exc, operation)
        return cls(str(exc), code=type(exc).__name__, operation=operation)


PROVIDER_EXCEPTIONS = (ClientError, BotoCoreError)


__all__ = ["ProviderError", "PROVIDER_EXCEPTIONS"]
