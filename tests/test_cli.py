"""Tests for the CLI adapter."""
import json

import pytest
from click.testing import CliRunner
from conftest import FakeIPSetClient, make_detail, make_page

from ipset_lookup.adapters.inbound import cli_adapter
from ipset_lookup.adapters.inbound.cli_adapter import cli
from ipset_lookup.application import IPSetResolver


@pytest.fixture
def fake_resolver(monkeypatch, logger):
    """Replace the boto3-backed factory with a resolver over a fake client."""
    client = FakeIPSetClient(
        pages=[make_page(["office"])],
        details={"id-office": make_detail("id-office", "office", ["10.0.0.0/8"])},
    )
    calls = []

    def _create_resolver(**kwargs):
        calls.append(kwargs)
        return IPSetResolver(client=client, logger=logger)

    monkeypatch.setattr(cli_adapter, "create_resolver", _create_resolver)
    return calls


class TestCLI:
    """Test the CLI interface."""

    def test_cli_help(self):
        """CLI should show help text."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "WAFv2 IP Set Lookup" in result.output
        assert "lookup" in result.output

    def test_cli_version(self):
        """CLI should show version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_lookup_help(self):
        """Lookup command should show help."""
        runner = CliRunner()
        result = runner.invoke(cli, ["lookup", "--help"])
        assert result.exit_code == 0
        assert "--name" in result.output
        assert "--scope" in result.output
        assert "--role-arn" in result.output

    def test_lookup_rejects_unknown_scope(self):
        """Scope is validated by the CLI before any AWS call."""
        runner = CliRunner()
        result = runner.invoke(cli, ["lookup", "-n", "office", "-s", "GLOBAL"])
        assert result.exit_code == 2

    def test_list_scopes(self):
        """Should list supported scopes."""
        runner = CliRunner()
        result = runner.invoke(cli, ["list-scopes"])
        assert result.exit_code == 0
        assert "REGIONAL" in result.output
        assert "CLOUDFRONT" in result.output
        assert "us-east-1" in result.output


class TestLookupCommand:
    """Test the lookup command against a fake client."""

    def test_lookup_to_stdout(self, fake_resolver):
        """The attribute document is printed."""
        runner = CliRunner()
        result = runner.invoke(cli, ["lookup", "-n", "office", "-s", "REGIONAL", "-r", "eu-west-1", "--stdout"])

        assert result.exit_code == 0
        assert json.loads(result.output)["addresses"] == ["10.0.0.0/8"]
        assert fake_resolver[0]["region"] == "eu-west-1"

    def test_lookup_to_csv_file(self, fake_resolver, tmp_path):
        """CSV output is written to the requested path."""
        output = tmp_path / "office.csv"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["lookup", "-n", "office", "-s", "REGIONAL", "-f", "csv", "-o", str(output)],
        )

        assert result.exit_code == 0
        assert "10.0.0.0/8" in output.read_text()
        assert "Result written to" in result.output

    def test_lookup_not_found(self, fake_resolver):
        """A missing IP set exits non-zero with the diagnostic."""
        runner = CliRunner()
        result = runner.invoke(cli, ["lookup", "-n", "missing", "-s", "REGIONAL", "--stdout"])

        assert result.exit_code == 1
        assert "WAFv2 IPSet not found for name: missing" in result.output


class TestWhoamiCommand:
    """Test the whoami command against a fake client."""

    def test_whoami_with_role(self, monkeypatch):
        """The role is assumed before the identity is read."""
        client = FakeIPSetClient()
        monkeypatch.setattr(
            "ipset_lookup.adapters.outbound.Boto3WAFv2Client",
            lambda logger, session=None, **kwargs: client,
        )

        runner = CliRunner()
        result = runner.invoke(cli, ["whoami", "--role-arn", "arn:aws:iam::210987654321:role/WAFReadOnly"])

        assert result.exit_code == 0
        assert "Account: 123456789012" in result.output
        assert client.assume_calls == [{
            "role_arn": "arn:aws:iam::210987654321:role/WAFReadOnly",
            "session_name": "waf-ipset-lookup-whoami",
            "external_id": None,
        }]

    def test_whoami_without_role(self, monkeypatch):
        """No role is assumed by default."""
        client = FakeIPSetClient()
        monkeypatch.setattr(
            "ipset_lookup.adapters.outbound.Boto3WAFv2Client",
            lambda logger, session=None, **kwargs: client,
        )

        result = CliRunner().invoke(cli, ["whoami"])

        assert result.exit_code == 0
        assert client.assume_calls == []
