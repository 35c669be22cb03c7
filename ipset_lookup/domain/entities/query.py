"""IPSetQuery - validated input of a lookup."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ipset_lookup.domain.errors import InvalidQueryError
from ipset_lookup.domain.value_objects.scope import Scope


@dataclass(frozen=True)
class IPSetQuery:
    """Name and scope of the IP set to resolve."""

    name: str
    scope: Scope

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "IPSetQuery":
        """
        Build a query from the raw configuration supplied by the host.

        Args:
            config: Mapping with "name" and "scope" keys

        Returns:
            A validated IPSetQuery

        Raises:
            InvalidQueryError: config is not a mapping, name missing/empty
                or scope outside the enum
        """
        if not isinstance(config, Mapping):
            raise InvalidQueryError(
                f"expected configuration to be a mapping, got: {type(config).__name__}"
            )

        name = config.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidQueryError("name is required and must be a non-empty string")

        scope = config.get("scope")
        if scope not in Scope.choices():
            raise InvalidQueryError(
                f"expected scope to be one of {Scope.choices()}, got: {scope!r}"
            )

        return cls(name=name, scope=Scope(scope))

    def __str__(self) -> str:
        return f"IPSetQuery({self.name}, {self.scope.value})"
