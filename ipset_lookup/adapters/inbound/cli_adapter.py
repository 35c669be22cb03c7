"""CLI Adapter - Command-line interface for the WAFv2 IP set lookup."""
import sys

import click

from ipset_lookup import __version__
from ipset_lookup.adapters.outbound import (
    ConsoleLogger,
    CSVExporter,
    JSONExporter,
    generate_output_filename,
)
from ipset_lookup.application.ipset_resolver import create_resolver
from ipset_lookup.domain.value_objects import Scope

OUTPUT_FORMATS = {
    "json": JSONExporter,
    "csv": CSVExporter,
}


@click.group()
@click.version_option(version=__version__, prog_name="waf-ipset-lookup")
def cli() -> None:
    """
    WAFv2 IP Set Lookup - Resolve a WAF IP set by name.

    Finds an IP set in a WAFv2 scope by its exact name and prints its
    ARN, description, IP version and addresses.
    """
    pass


@cli.command()
@click.option(
    "--name", "-n",
    required=True,
    help="Exact (case-sensitive) name of the IP set.",
)
@click.option(
    "--scope", "-s",
    required=True,
    type=click.Choice(Scope.choices()),
    help="WAFv2 scope of the IP set.",
)
@click.option(
    "--region", "-r",
    default=None,
    help="AWS region for REGIONAL IP sets. CLOUDFRONT always uses us-east-1.",
)
@click.option(
    "--profile",
    default=None,
    help="Named AWS profile to use.",
)
@click.option(
    "--role-arn",
    default=None,
    help="IAM role ARN to assume for cross-account lookups.",
)
@click.option(
    "--external-id",
    default=None,
    help="External ID used when assuming --role-arn.",
)
@click.option(
    "--output", "-o",
    default=None,
    help="Output file path. Default: auto-generated filename.",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(sorted(OUTPUT_FORMATS)),
    default="json",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--stdout",
    is_flag=True,
    help="Write the result to stdout instead of a file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (DEBUG level logging).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Suppress all output except errors.",
)
def lookup(
    name: str,
    scope: str,
    region: str | None,
    profile: str | None,
    role_arn: str | None,
    external_id: str | None,
    output: str | None,
    output_format: str,
    stdout: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Look up a WAFv2 IP set by name and scope.

    Examples:

        # Regional IP set in eu-west-1
        waf-ipset-lookup lookup -n office-ranges -s REGIONAL -r eu-west-1

        # CloudFront IP set, printed as JSON
        waf-ipset-lookup lookup -n blocked-ips -s CLOUDFRONT --stdout

        # Cross-account lookup, addresses as CSV
        waf-ipset-lookup lookup -n office-ranges -s REGIONAL -f csv \\
            --role-arn arn:aws:iam::123456789012:role/WAFReadOnly
    """
    log_level = "DEBUG" if verbose else ("ERROR" if quiet else "INFO")
    logger = ConsoleLogger(level=log_level)

    try:
        resolver = create_resolver(
            logger=logger,
            region=region,
            profile=profile,
            role_arn=role_arn,
            external_id=external_id,
        )
    except Exception as e:
        logger.error(f"Could not create AWS client: {e}", exception=e)
        sys.exit(1)

    result = resolver.read({"name": name, "scope": scope})

    if not result.ok:
        for diagnostic in result.diagnostics:
            click.echo(f"Error: {diagnostic.summary}", err=True)
        sys.exit(1)

    if stdout:
        output_path = "stdout"
    elif output:
        output_path = output
    else:
        output_path = generate_output_filename(result, extension=output_format)

    actual_path = resolver.export_result(result, OUTPUT_FORMATS[output_format](), output_path)

    if not stdout and not quiet:
        _print_summary(result, actual_path)


@cli.command()
@click.option(
    "--role-arn",
    default=None,
    help="IAM role ARN to assume (test assumed role identity).",
)
@click.option(
    "--profile",
    default=None,
    help="Named AWS profile to use.",
)
def whoami(role_arn: str | None, profile: str | None) -> None:
    """
    Show the current AWS identity.

    Useful for verifying credentials before a lookup.
    """
    logger = ConsoleLogger(level="INFO")

    try:
        import boto3

        from ipset_lookup.adapters.outbound import Boto3WAFv2Client

        session = boto3.Session(profile_name=profile) if profile else None
        aws_client = Boto3WAFv2Client(logger=logger, session=session)

        if role_arn:
            aws_client = aws_client.assume_role(
                role_arn=role_arn,
                session_name="waf-ipset-lookup-whoami",
            )

        identity = aws_client.get_caller_identity()

        click.echo(f"Account: {identity['account']}")
        click.echo(f"ARN: {identity['arn']}")
        click.echo(f"User ID: {identity['user_id']}")

    except Exception as e:
        logger.error(f"Failed to get identity: {e}", exception=e)
        sys.exit(1)


@cli.command()
def list_scopes() -> None:
    """
    List the WAFv2 scopes an IP set can live in.
    """
    click.echo("Supported scopes:\n")
    for scope in Scope:
        click.echo(f"  {scope.value}")
        click.echo(f"    Display name: {scope.display_name}")
        if scope.is_global:
            click.echo(f"    API region: {scope.api_region('any')}")
        click.echo()


def _print_summary(result, output_path: str) -> None:
    """Print a summary of the resolved IP set."""
    ip_set = result.ip_set
    click.echo("\n" + "=" * 60)
    click.echo("IP SET")
    click.echo("=" * 60)
    click.echo(f"Name: {ip_set.name}")
    click.echo(f"ID: {ip_set.id}")
    click.echo(f"ARN: {ip_set.arn}")
    click.echo(f"Scope: {ip_set.scope.value if ip_set.scope else ''}")
    click.echo(f"IP version: {ip_set.ip_address_version.value}")
    click.echo(f"Addresses: {ip_set.address_count}")
    if ip_set.description:
        click.echo(f"Description: {ip_set.description}")

    click.echo(f"\nResult written to: {output_path}")
    click.echo("=" * 60)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
