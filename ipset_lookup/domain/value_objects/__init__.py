"""Value objects for the WAFv2 IP set lookup domain."""
from ipset_lookup.domain.value_objects.ip_address_version import IPAddressVersion
from ipset_lookup.domain.value_objects.scope import CLOUDFRONT_REGION, Scope

__all__ = ["Scope", "IPAddressVersion", "CLOUDFRONT_REGION"]
