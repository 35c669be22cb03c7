"""Domain layer for the WAFv2 IP set lookup."""
from ipset_lookup.domain.entities import (
    Diagnostic,
    IPSetDetail,
    IPSetPage,
    IPSetQuery,
    IPSetSummary,
    LookupResult,
)
from ipset_lookup.domain.errors import (
    InvalidQueryError,
    IPSetLookupError,
    IPSetNotFoundError,
    MalformedResponseError,
    TransportError,
)
from ipset_lookup.domain.value_objects import IPAddressVersion, Scope

__all__ = [
    "IPSetSummary",
    "IPSetPage",
    "IPSetDetail",
    "IPSetQuery",
    "Diagnostic",
    "LookupResult",
    "Scope",
    "IPAddressVersion",
    "IPSetLookupError",
    "InvalidQueryError",
    "TransportError",
    "MalformedResponseError",
    "IPSetNotFoundError",
]
