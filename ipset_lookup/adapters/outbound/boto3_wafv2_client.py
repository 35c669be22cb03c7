"""Boto3 WAFv2 Client Adapter - Implementation of IPSetClientPort using boto3."""
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ipset_lookup.domain.entities import IPSetDetail, IPSetPage, IPSetSummary
from ipset_lookup.domain.errors import MalformedResponseError, TransportError
from ipset_lookup.domain.value_objects import IPAddressVersion, Scope
from ipset_lookup.ports.outbound import LoggerPort

DEFAULT_REGION = "us-east-1"

# Retries and timeouts are owned by botocore, not by the resolver
DEFAULT_BOTO_CONFIG = Config(
    retries={"max_attempts": 8, "mode": "adaptive"},
    read_timeout=20,
    connect_timeout=10,
)


class Boto3WAFv2Client:
    """
    Implementation of IPSetClientPort using boto3.

    This adapter handles all AWS API interactions for IP set lookups.
    """

    def __init__(
        self,
        logger: LoggerPort,
        session: boto3.Session | None = None,
        region: str | None = None,
        config: Config | None = None,
    ):
        """
        Initialize the AWS client.

        Args:
            logger: Logger for operation logging
            session: Optional boto3 session (uses default if not provided)
            region: Region for REGIONAL calls (defaults to the session region)
            config: Optional botocore config (retries, timeouts)
        """
        self._logger = logger
        self._session = session or boto3.Session()
        self._region = region or self._session.region_name or DEFAULT_REGION
        self._config = config or DEFAULT_BOTO_CONFIG
        self._client_cache: dict[str, Any] = {}

    @property
    def region(self) -> str:
        """Region used for REGIONAL scope calls."""
        return self._region

    def _get_client(self, service: str, region: str) -> Any:
        """Get or create a boto3 client for a service/region combination."""
        cache_key = f"{service}:{region}"
        if cache_key not in self._client_cache:
            self._client_cache[cache_key] = self._session.client(
                service,
                region_name=region,
                config=self._config,
            )
        return self._client_cache[cache_key]

    def _wafv2(self, scope: Scope) -> Any:
        return self._get_client("wafv2", scope.api_region(self._region))

    def get_caller_identity(self) -> dict:
        """Get the current AWS identity."""
        sts = self._get_client("sts", self._region)
        response = sts.get_caller_identity()
        return {
            "account": response["Account"],
            "arn": response["Arn"],
            "user_id": response["UserId"],
        }

    def assume_role(
        self,
        role_arn: str,
        session_name: str,
        external_id: str | None = None,
    ) -> "Boto3WAFv2Client":
        """
        Assume a role and return a new client with those credentials.

        Args:
            role_arn: ARN of the role to assume
            session_name: Name for the assumed role session
            external_id: Optional external ID for confused deputy prevention

        Returns:
            New Boto3WAFv2Client with assumed role credentials
        """
        self._logger.info(f"Assuming role: {role_arn}")
        sts = self._get_client("sts", self._region)

        assume_params = {
            "RoleArn": role_arn,
            "RoleSessionName": session_name,
        }
        if external_id:
            assume_params["ExternalId"] = external_id

        response = sts.assume_role(**assume_params)
        credentials = response["Credentials"]
        new_session = boto3.Session(
            aws_access_key_id=credentials["AccessKeyId"],
            aws_secret_access_key=credentials["SecretAccessKey"],
            aws_session_token=credentials["SessionToken"],
            region_name=self._region,
        )
        return Boto3WAFv2Client(
            logger=self._logger,
            session=new_session,
            region=self._region,
            config=self._config,
        )

    # IP set methods

    def list_ip_sets(
        self,
        scope: Scope,
        limit: int,
        next_marker: str | None = None,
    ) -> IPSetPage:
        """Request one page of ListIPSets."""
        wafv2 = self._wafv2(scope)

        params: dict[str, Any] = {"Scope": scope.value, "Limit": limit}
        if next_marker:
            params["NextMarker"] = next_marker

        try:
            response = wafv2.list_ip_sets(**params)
        except (ClientError, BotoCoreError) as e:
            raise _transport_error(e) from e

        # An empty marker ends the listing like an absent one
        next_marker = response.get("NextMarker") or None

        raw_ip_sets = response.get("IPSets")
        if raw_ip_sets is None:
            return IPSetPage(ip_sets=None, next_marker=next_marker)

        ip_sets = []
        for item in raw_ip_sets:
            if not item.get("Id") or not item.get("Name"):
                self._logger.debug("Skipping IPSet summary without Id or Name", summary=item)
                continue
            ip_sets.append(IPSetSummary(
                id=item["Id"],
                name=item["Name"],
                arn=item.get("ARN"),
                description=item.get("Description"),
                lock_token=item.get("LockToken"),
            ))
        return IPSetPage(ip_sets=ip_sets, next_marker=next_marker)

    def get_ip_set(self, ip_set_id: str, name: str, scope: Scope) -> IPSetDetail | None:
        """Fetch one IP set with GetIPSet."""
        wafv2 = self._wafv2(scope)

        try:
            response = wafv2.get_ip_set(Id=ip_set_id, Name=name, Scope=scope.value)
        except (ClientError, BotoCoreError) as e:
            raise _transport_error(e) from e

        ip_set = response.get("IPSet")
        if not ip_set:
            return None

        try:
            return IPSetDetail(
                id=ip_set["Id"],
                name=ip_set["Name"],
                arn=ip_set["ARN"],
                ip_address_version=IPAddressVersion(ip_set["IPAddressVersion"]),
                addresses=frozenset(ip_set.get("Addresses") or []),
                scope=scope,
                description=ip_set.get("Description"),
            )
        except (KeyError, ValueError) as e:
            raise MalformedResponseError(f"unexpected IPSet payload: {e!r}") from e


def _transport_error(error: Exception) -> TransportError:
    """Translate a botocore failure into a TransportError."""
    error_code = None
    if isinstance(error, ClientError):
        error_code = error.response.get("Error", {}).get("Code")
    return TransportError(str(error), error_code=error_code)
