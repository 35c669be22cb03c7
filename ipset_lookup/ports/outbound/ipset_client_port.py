"""IP Set Client Port - Interface for the WAFv2 IP set API."""
from typing import Protocol

from ipset_lookup.domain.entities import IPSetDetail, IPSetPage
from ipset_lookup.domain.value_objects import Scope


class IPSetClientPort(Protocol):
    """
    Port interface for WAFv2 IP set reads.

    Implementations should use boto3 or in-memory fakes for testing.
    Failures of the underlying call are raised as TransportError.
    """

    def list_ip_sets(
        self,
        scope: Scope,
        limit: int,
        next_marker: str | None = None,
    ) -> IPSetPage:
        """
        Request one page of IP set summaries.

        Args:
            scope: WAFv2 scope to list
            limit: Maximum number of summaries on the page
            next_marker: Continuation marker from the previous page, if any

        Returns:
            IPSetPage (ip_sets is None if the response carried no IPSets;
            summaries without an id or name are left out)

        Raises:
            TransportError: the API call failed
        """
        ...

    def get_ip_set(self, ip_set_id: str, name: str, scope: Scope) -> IPSetDetail | None:
        """
        Fetch the full record of one IP set.

        Args:
            ip_set_id: IP set identifier
            name: IP set name
            scope: WAFv2 scope of the IP set

        Returns:
            IPSetDetail, or None if the response carried no IPSet

        Raises:
            TransportError: the API call failed
            MalformedResponseError: the IPSet payload lacks a required field
        """
        ...

    def get_caller_identity(self) -> dict:
        """
        Get the current AWS identity.

        Returns:
            Dict with account, arn, user_id
        """
        ...

    def assume_role(
        self,
        role_arn: str,
        session_name: str,
        external_id: str | None = None,
    ) -> "IPSetClientPort":
        """
        Assume a role and return a new client with those credentials.

        Args:
            role_arn: ARN of the role to assume
            session_name: Name for the assumed role session
            external_id: Optional external ID for confused deputy prevention

        Returns:
            New IPSetClientPort instance with assumed credentials
        """
        ...
