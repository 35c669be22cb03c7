"""Domain errors raised while resolving a WAFv2 IP set."""


class IPSetLookupError(Exception):
    """Base class for every failure of a single IP set lookup."""


class InvalidQueryError(IPSetLookupError):
    """The caller-supplied configuration failed validation."""


class TransportError(IPSetLookupError):
    """A WAFv2 API call itself failed (network, auth or service fault)."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class MalformedResponseError(IPSetLookupError):
    """A WAFv2 API call succeeded but returned an absent payload."""


class IPSetNotFoundError(IPSetLookupError):
    """The listing completed but no IP set matched the requested name."""

    def __init__(self, name: str):
        super().__init__(f"WAFv2 IPSet not found for name: {name}")
        self.name = name
