"""IP address version enumeration for WAFv2 IP sets."""
from enum import Enum


class IPAddressVersion(str, Enum):
    """IP protocol version of the addresses held by an IP set."""

    IPV4 = "IPV4"
    IPV6 = "IPV6"
