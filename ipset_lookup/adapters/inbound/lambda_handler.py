"""Lambda Handler - AWS Lambda entry point for the WAFv2 IP set lookup."""
import os
from collections.abc import Mapping
from typing import Any

from ipset_lookup.adapters.outbound import Boto3WAFv2Client, CloudWatchLogger
from ipset_lookup.application.ipset_resolver import IPSetResolver
from ipset_lookup.domain.entities import Diagnostic, LookupResult

# HTTP-like status for each failure class
STATUS_BY_ERROR = {
    "InvalidQueryError": 400,
    "IPSetNotFoundError": 404,
    "TransportError": 502,
    "MalformedResponseError": 502,
}


def build_response(result: LookupResult) -> dict:
    """
    Map a lookup result to the Lambda response document.

    Args:
        result: The lookup result

    Returns:
        Dict with statusCode and body (attributes or diagnostics)
    """
    if result.ok:
        status_code = 200
    else:
        status_code = STATUS_BY_ERROR.get(result.error_type() or "", 500)

    body = result.to_dict()
    if not result.ok:
        body = {"id": None, **body}

    return {"statusCode": status_code, "body": body}


def handler(event: Any, context: Any) -> dict:
    """
    AWS Lambda handler for the IP set lookup.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        WAF_REGION: Region for REGIONAL IP sets (default: AWS_REGION, then us-east-1)
        ASSUME_ROLE_ARN: Optional IAM role to assume before the lookup
        EXTERNAL_ID: External ID for secure role assumption

    Args:
        event: Lambda event with "name" and "scope"
        context: Lambda context

    Returns:
        Dict with statusCode and the IP set attributes or diagnostics
    """
    log_level = os.environ.get("LOG_LEVEL", "INFO")
    logger = CloudWatchLogger(level=log_level)

    logger.bind_lambda_context(context)

    region = os.environ.get("WAF_REGION") or os.environ.get("AWS_REGION") or "us-east-1"
    role_arn = os.environ.get("ASSUME_ROLE_ARN", "")
    external_id = os.environ.get("EXTERNAL_ID", "")

    fields = event if isinstance(event, Mapping) else {}
    logger.info(
        "lambda_invoked",
        name=fields.get("name"),
        scope=fields.get("scope"),
        region=region,
        assume_role=bool(role_arn),
    )

    try:
        client = Boto3WAFv2Client(logger=logger, region=region)
        if role_arn:
            client = client.assume_role(
                role_arn=role_arn,
                session_name="waf-ipset-lookup-lambda",
                external_id=external_id if external_id else None,
            )
    except Exception as e:
        logger.error("Failed to create AWS client", exception=e)
        return {
            "statusCode": 500,
            "body": {
                "id": None,
                "diagnostics": [
                    Diagnostic(summary=f"creating AWS client: {e}", detail=type(e).__name__).to_dict(),
                ],
            },
        }

    resolver = IPSetResolver(client=client, logger=logger)
    result = resolver.read(event)
    response = build_response(result)

    logger.info(
        "lambda_completed",
        status_code=response["statusCode"],
        ip_set_id=result.id,
    )

    return response
