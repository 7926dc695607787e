"""Test doubles for collaborators that need real keys or wall-clock time."""

from datetime import UTC, datetime, timedelta
from typing import Any


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: float = 0, hours: float = 0) -> None:
        self.now += timedelta(days=days, hours=hours)


class FakeSignatureVerifier:
    """Stands in for the AliPay client: accepts one known signature."""

    def __init__(self, valid_signature: str = "valid-signature"):
        self.valid_signature = valid_signature
        self.calls: list[tuple[dict[str, Any], str]] = []

    def verify(self, data: dict[str, Any], signature: str) -> bool:
        self.calls.append((dict(data), signature))
        return signature == self.valid_signature


class RaisingSignatureVerifier:
    def verify(self, data: dict[str, Any], signature: str) -> bool:
        raise ValueError("malformed signature")
