"""Errors raised by collaborator clients."""

from __future__ import annotations


class ExternalServiceError(RuntimeError):
    """A call to an external service could not complete or was rejected."""

    transient: bool = False

    def __init__(
        self,
        message: str,
        *,
        service: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return f"[{self.service}] {base}"
        return f"[{self.service}] {base} (status {self.status_code})"


class TransientServiceError(ExternalServiceError):
    """Timeouts, transport failures, 429 and 5xx responses; retrying later may succeed."""

    transient = True


class PermanentServiceError(ExternalServiceError):
    """4xx responses other than 429; retrying the same request will fail again."""
