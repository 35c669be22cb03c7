"""LookupResult - what a lookup hands back to the host runtime."""
from dataclasses import dataclass, field

from ipset_lookup.domain.entities.ip_set import IPSetDetail
from ipset_lookup.domain.errors import IPSetLookupError


@dataclass(frozen=True)
class Diagnostic:
    """A single human-readable problem report."""

    summary: str
    severity: str = "error"
    detail: str | None = None

    @classmethod
    def from_error(cls, error: IPSetLookupError) -> "Diagnostic":
        """Build an error diagnostic from a lookup error."""
        return cls(summary=str(error), detail=type(error).__name__)

    def to_dict(self) -> dict:
        """Serialize the diagnostic."""
        return {
            "severity": self.severity,
            "summary": self.summary,
            "detail": self.detail,
        }


@dataclass
class LookupResult:
    """
    Result of one IP set lookup.

    Either ip_set is set and diagnostics is empty, or ip_set is None and
    diagnostics explains why. Partial output is never returned.
    """

    ip_set: IPSetDetail | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def success(cls, ip_set: IPSetDetail) -> "LookupResult":
        return cls(ip_set=ip_set)

    @classmethod
    def failure(cls, error: IPSetLookupError) -> "LookupResult":
        return cls(diagnostics=[Diagnostic.from_error(error)])

    @property
    def ok(self) -> bool:
        """Check if the lookup produced an IP set."""
        return self.ip_set is not None and not self.has_errors()

    @property
    def id(self) -> str | None:
        """Identifier of the resolved record, if any."""
        return self.ip_set.id if self.ip_set else None

    def has_errors(self) -> bool:
        """Check if any error diagnostic was recorded."""
        return any(d.severity == "error" for d in self.diagnostics)

    def error_type(self) -> str | None:
        """Name of the error class behind the first error diagnostic."""
        for diagnostic in self.diagnostics:
            if diagnostic.severity == "error":
                return diagnostic.detail
        return None

    def to_dict(self) -> dict:
        """Serialize to the document written by exporters and the Lambda handler."""
        if self.ip_set is not None:
            return self.ip_set.to_attributes()
        return {"diagnostics": [d.to_dict() for d in self.diagnostics]}

    def __str__(self) -> str:
        if self.ok:
            return f"LookupResult(ok, {self.ip_set})"
        return f"LookupResult(failed, {len(self.diagnostics)} diagnostics)"
