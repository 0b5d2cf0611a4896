"""Error taxonomy shared by gateways, services and entrypoints."""


class TransportError(Exception):
    """Base exception for every failure a command can report."""


class StopNotFoundError(TransportError):
    """Raised when a place name resolves to no stop, site or location."""

    def __init__(self, location: str, role: str = "location") -> None:
        self.location = location
        self.role = role
        super().__init__(f"no stops found for {role} '{location}'")


class UpstreamError(TransportError):
    """Raised when a provider call fails (status, transport or decode error)."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body[:200]
        detail = message
        if status_code is not None:
            detail = f"{message} (HTTP {status_code})"
        if self.body:
            detail = f"{detail}: {self.body}"
        super().__init__(detail)


class ConfigurationError(TransportError):
    """Raised before any network call when required configuration is missing."""


class InvalidInputError(TransportError):
    """Raised for user input that cannot be interpreted (dates, modes, arguments)."""
