"""WAFv2 IP Set Lookup.

Resolve an AWS WAFv2 IP set by name and scope and expose its attributes.
"""

__version__ = "0.1.0"

# Application layer
from ipset_lookup.application import IPSetResolver, create_resolver

# Domain layer
from ipset_lookup.domain import IPSetDetail, IPSetQuery, LookupResult, Scope

__all__ = [
    "__version__",
    # Domain
    "IPSetDetail",
    "IPSetQuery",
    "LookupResult",
    "Scope",
    # Application
    "IPSetResolver",
    "create_resolver",
]
