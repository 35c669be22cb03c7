"""IP set entities returned by the WAFv2 listing and fetch calls."""
from dataclasses import dataclass, field

from ipset_lookup.domain.value_objects.ip_address_version import IPAddressVersion
from ipset_lookup.domain.value_objects.scope import Scope


@dataclass(frozen=True)
class IPSetSummary:
    """Identity record returned by ListIPSets."""

    id: str
    name: str

    arn: str | None = None
    description: str | None = None
    lock_token: str | None = None

    def matches(self, name: str) -> bool:
        """Check for an exact, case-sensitive name match."""
        return self.name == name

    def __str__(self) -> str:
        return f"IPSetSummary({self.name}, {self.id})"


@dataclass(frozen=True)
class IPSetPage:
    """
    One page of the ListIPSets call.

    ip_sets is None when the response carried no IPSets field at all.
    An absent or empty next_marker means the listing is exhausted.
    """

    ip_sets: list[IPSetSummary] | None
    next_marker: str | None = None

    @property
    def has_more(self) -> bool:
        """Check if another page can be requested."""
        return bool(self.next_marker)

    def find(self, name: str) -> IPSetSummary | None:
        """Return the first summary on this page named exactly `name`."""
        for summary in self.ip_sets or []:
            if summary.matches(name):
                return summary
        return None


@dataclass(frozen=True)
class IPSetDetail:
    """Full IP set record returned by GetIPSet."""

    id: str
    name: str
    arn: str
    ip_address_version: IPAddressVersion
    addresses: frozenset[str] = field(default_factory=frozenset)

    scope: Scope | None = None
    description: str | None = None

    @property
    def address_count(self) -> int:
        """Number of CIDR ranges in the set."""
        return len(self.addresses)

    def to_attributes(self) -> dict:
        """
        Flatten the record into the computed attributes exposed to the host.

        Addresses are sorted so the document is stable across reads.
        """
        return {
            "id": self.id,
            "name": self.name,
            "scope": self.scope.value if self.scope else None,
            "arn": self.arn,
            "description": self.description or "",
            "ip_address_version": self.ip_address_version.value,
            "addresses": sorted(self.addresses),
        }

    def __str__(self) -> str:
        return f"IPSetDetail({self.name}, {self.ip_address_version.value}, {self.address_count} addresses)"
