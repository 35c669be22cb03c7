"""Test configuration and shared fixtures."""
from typing import Any

import pytest

from ipset_lookup.domain.entities import IPSetDetail, IPSetPage, IPSetSummary
from ipset_lookup.domain.errors import TransportError
from ipset_lookup.domain.value_objects import IPAddressVersion, Scope


class FakeIPSetClient:
    """In-memory IPSetClientPort that replays canned pages and records calls."""

    def __init__(
        self,
        pages: list[IPSetPage] | None = None,
        details: dict[str, IPSetDetail | None] | None = None,
        list_error: Exception | None = None,
        get_error: Exception | None = None,
    ):
        self.pages = pages or []
        self.details = details or {}
        self.list_error = list_error
        self.get_error = get_error
        self.list_calls: list[dict] = []
        self.get_calls: list[dict] = []
        self.assume_calls: list[dict] = []

    def list_ip_sets(self, scope: Scope, limit: int, next_marker: str | None = None) -> IPSetPage:
        self.list_calls.append({"scope": scope, "limit": limit, "next_marker": next_marker})
        if self.list_error:
            raise self.list_error
        index = 0 if next_marker is None else int(next_marker)
        return self.pages[index]

    def get_ip_set(self, ip_set_id: str, name: str, scope: Scope) -> IPSetDetail | None:
        self.get_calls.append({"id": ip_set_id, "name": name, "scope": scope})
        if self.get_error:
            raise self.get_error
        return self.details.get(ip_set_id)

    def get_caller_identity(self) -> dict:
        return {"account": "123456789012", "arn": "arn:aws:iam::123456789012:user/test", "user_id": "AIDTEST"}

    def assume_role(self, role_arn: str, session_name: str, external_id: str | None = None) -> "FakeIPSetClient":
        self.assume_calls.append({"role_arn": role_arn, "session_name": session_name, "external_id": external_id})
        return self


class RecordingLogger:
    """LoggerPort that keeps entries in memory."""

    def __init__(self):
        self.entries: list[tuple[str, str, dict[str, Any]]] = []
        self.context: dict[str, Any] = {}

    def debug(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("WARNING", message, kwargs))

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        self.entries.append(("ERROR", message, {**kwargs, "exception": exception}))

    def set_level(self, level: str) -> None:
        pass

    def set_context(self, **kwargs: Any) -> None:
        self.context.update(kwargs)

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.entries if lvl == level]


def make_page(names: list[str], next_marker: str | None = None, prefix: str = "id") -> IPSetPage:
    """Build a listing page whose summaries get ids derived from their names."""
    return IPSetPage(
        ip_sets=[IPSetSummary(id=f"{prefix}-{name}", name=name) for name in names],
        next_marker=next_marker,
    )


def make_detail(
    ip_set_id: str,
    name: str,
    addresses: list[str] | None = None,
    scope: Scope | None = Scope.REGIONAL,
) -> IPSetDetail:
    return IPSetDetail(
        id=ip_set_id,
        name=name,
        arn=f"arn:aws:wafv2:us-east-1:123456789012:regional/ipset/{name}/{ip_set_id}",
        ip_address_version=IPAddressVersion.IPV4,
        addresses=frozenset(addresses or ["10.0.0.0/8", "192.168.1.0/24"]),
        scope=scope,
        description=f"{name} ranges",
    )


@pytest.fixture
def sample_account_id() -> str:
    """Sample AWS account ID for testing."""
    return "123456789012"


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("AccessDeniedException: not authorized", error_code="AccessDeniedException")
