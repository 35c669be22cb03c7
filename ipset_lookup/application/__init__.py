"""Application layer - Use cases and business logic."""
from ipset_lookup.application.ipset_resolver import (
    DEFAULT_PAGE_LIMIT,
    IPSetResolver,
    create_resolver,
)

__all__ = [
    "IPSetResolver",
    "create_resolver",
    "DEFAULT_PAGE_LIMIT",
]
