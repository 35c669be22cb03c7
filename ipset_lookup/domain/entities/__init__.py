"""Domain entities for the WAFv2 IP set lookup."""
from ipset_lookup.domain.entities.ip_set import IPSetDetail, IPSetPage, IPSetSummary
from ipset_lookup.domain.entities.lookup_result import Diagnostic, LookupResult
from ipset_lookup.domain.entities.query import IPSetQuery

__all__ = [
    "IPSetSummary",
    "IPSetPage",
    "IPSetDetail",
    "IPSetQuery",
    "Diagnostic",
    "LookupResult",
]
