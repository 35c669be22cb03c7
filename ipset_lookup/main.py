"""WAFv2 IP Set Lookup - Main entry point.

Resolve a WAF IP set by name and scope.
"""
from ipset_lookup.adapters.inbound.cli_adapter import main as cli_main


def main() -> None:
    """Main entry point - delegates to CLI adapter."""
    cli_main()


if __name__ == "__main__":
    main()
