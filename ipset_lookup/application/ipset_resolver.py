"""IP Set Resolver - Name-to-record resolution of WAFv2 IP sets."""
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from ipset_lookup.domain.entities import IPSetDetail, IPSetQuery, IPSetSummary, LookupResult
from ipset_lookup.domain.errors import (
    IPSetLookupError,
    IPSetNotFoundError,
    MalformedResponseError,
    TransportError,
)
from ipset_lookup.ports.outbound import IPSetClientPort, LoggerPort, OutputPort

# Largest page ListIPSets accepts
DEFAULT_PAGE_LIMIT = 100


class IPSetResolver:
    """
    Resolve a WAFv2 IP set by name and scope.

    Lists the IP sets of the scope page by page, stops at the first summary
    whose name matches exactly, then fetches that IP set in full.
    Every failure is returned as a diagnostic on the LookupResult.
    """

    def __init__(
        self,
        client: IPSetClientPort,
        logger: LoggerPort,
        page_limit: int = DEFAULT_PAGE_LIMIT,
    ):
        """
        Initialize the resolver.

        Args:
            client: WAFv2 client used for listing and fetching
            logger: Logger for operation logging
            page_limit: Page size requested from ListIPSets
        """
        self._client = client
        self._logger = logger
        self._page_limit = page_limit

    def read(self, config: Mapping[str, Any]) -> LookupResult:
        """
        Validate the host configuration and resolve the IP set it names.

        Args:
            config: Raw mapping with "name" and "scope"

        Returns:
            LookupResult with the IP set, or with diagnostics on failure
        """
        try:
            query = IPSetQuery.from_config(config)
        except IPSetLookupError as e:
            self._logger.error(f"Invalid IP set lookup configuration: {e}", exception=e)
            return LookupResult.failure(e)

        return self.resolve(query)

    def resolve(self, query: IPSetQuery) -> LookupResult:
        """
        Resolve a validated query.

        Args:
            query: Name and scope of the IP set

        Returns:
            LookupResult with the IP set, or with diagnostics on failure
        """
        self._logger.set_context(ipset_name=query.name, scope=query.scope.value)
        self._logger.info("Resolving WAFv2 IPSet")

        try:
            ip_set = self._resolve(query)
        except IPSetLookupError as e:
            self._logger.error(f"IPSet lookup failed: {e}", exception=e)
            return LookupResult.failure(e)

        self._logger.info(
            "Resolved WAFv2 IPSet",
            id=ip_set.id,
            arn=ip_set.arn,
            addresses_count=ip_set.address_count,
        )
        return LookupResult.success(ip_set)

    def _resolve(self, query: IPSetQuery) -> IPSetDetail:
        summary = self._find_summary(query)
        if summary is None:
            raise IPSetNotFoundError(query.name)

        try:
            ip_set = self._client.get_ip_set(summary.id, summary.name, query.scope)
        except TransportError as e:
            raise TransportError(f"reading WAFv2 IPSet: {e}", error_code=e.error_code) from e
        except MalformedResponseError as e:
            raise MalformedResponseError(f"reading WAFv2 IPSet: {e}") from e

        if ip_set is None:
            raise MalformedResponseError("reading WAFv2 IPSet: empty response")

        if ip_set.scope is None:
            ip_set = replace(ip_set, scope=query.scope)
        return ip_set

    def _find_summary(self, query: IPSetQuery) -> IPSetSummary | None:
        """Walk ListIPSets pages until the first exact name match."""
        next_marker: str | None = None
        page_number = 0

        while True:
            page_number += 1
            try:
                page = self._client.list_ip_sets(
                    scope=query.scope,
                    limit=self._page_limit,
                    next_marker=next_marker,
                )
            except TransportError as e:
                raise TransportError(f"reading WAFv2 IPSets: {e}", error_code=e.error_code) from e

            if page.ip_sets is None:
                raise MalformedResponseError("reading WAFv2 IPSets: empty response")

            self._logger.debug(
                f"Fetched IPSets page {page_number}",
                count=len(page.ip_sets),
                has_more=page.has_more,
            )

            # First match in scan order wins; later pages are not requested
            summary = page.find(query.name)
            if summary is not None:
                self._logger.debug(f"Matched IPSet {summary.id} on page {page_number}")
                return summary

            if not page.has_more:
                return None
            next_marker = page.next_marker

    def export_result(self, result: LookupResult, output: OutputPort, output_path: str) -> str:
        """
        Write a lookup result through an output adapter.

        Args:
            result: The lookup result to export
            output: Output adapter
            output_path: Path for the output

        Returns:
            The actual path where the result was written
        """
        output_location = output.write(result, output_path)
        self._logger.info(
            f"Result exported to {output_location}",
            format=output.get_format_name(),
        )
        return output_location


def create_resolver(
    logger: LoggerPort,
    region: str | None = None,
    profile: str | None = None,
    role_arn: str | None = None,
    external_id: str | None = None,
) -> IPSetResolver:
    """
    Factory function to create a properly configured IPSetResolver.

    Args:
        logger: Logger instance to use
        region: AWS region for REGIONAL IP sets (CLOUDFRONT always uses us-east-1)
        profile: Optional named AWS profile
        role_arn: Optional role to assume for cross-account access
        external_id: Optional external ID for the role assumption

    Returns:
        Configured IPSetResolver instance
    """
    import boto3

    from ipset_lookup.adapters.outbound import Boto3WAFv2Client

    session = boto3.Session(profile_name=profile) if profile else None
    client = Boto3WAFv2Client(logger=logger, session=session, region=region)

    if role_arn:
        client = client.assume_role(
            role_arn=role_arn,
            session_name="waf-ipset-lookup",
            external_id=external_id,
        )

    return IPSetResolver(client=client, logger=logger)
