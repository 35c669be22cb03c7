"""Scope enumeration for WAFv2 resources."""
from enum import Enum

# CloudFront-scoped WAF resources only exist in us-east-1
CLOUDFRONT_REGION = "us-east-1"


class Scope(str, Enum):
    """Deployment context of a WAFv2 resource."""

    REGIONAL = "REGIONAL"
    CLOUDFRONT = "CLOUDFRONT"

    @classmethod
    def choices(cls) -> list[str]:
        """Return the accepted scope strings."""
        return [scope.value for scope in cls]

    @property
    def is_global(self) -> bool:
        """Check if this scope targets CloudFront (global edge)."""
        return self == Scope.CLOUDFRONT

    def api_region(self, region: str) -> str:
        """
        Return the region the WAFv2 API must be called in for this scope.

        Args:
            region: Configured region

        Returns:
            us-east-1 for CLOUDFRONT, the configured region otherwise
        """
        return CLOUDFRONT_REGION if self.is_global else region

    @property
    def display_name(self) -> str:
        """Human-readable name for the scope."""
        mapping = {
            Scope.REGIONAL: "Regional (ALB, API Gateway, AppSync, Cognito, App Runner)",
            Scope.CLOUDFRONT: "CloudFront (global edge)",
        }
        return mapping[self]
