"""Custom exception hierarchy for the application."""


class AppError(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class InvalidWaypointsError(AppError):
    """Raised when the caller supplies too few or malformed waypoints."""

    def __init__(self, message: str = "at least two waypoints required") -> None:
        super().__init__(message, code="INVALID_WAYPOINTS")


class ProviderError(AppError):
    """Raised when an outbound routing or search provider call fails."""

    def __init__(
        self, provider: str, message: str, *, status_code: int | None = None
    ) -> None:
        super().__init__(f"{provider}: {message}", code="PROVIDER_ERROR")
        self.provider = provider
        self.status_code = status_code


class ElevationLookupError(AppError):
    """Raised when the elevation provider cannot answer a batched lookup."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ELEVATION_LOOKUP_ERROR")


class NoSnapFoundError(AppError):
    """Raised when no routable point lies near the requested coordinate."""

    def __init__(self, latitude: float, longitude: float) -> None:
        super().__init__("No snap found", code="NO_SNAP_FOUND")
        self.latitude = latitude
        self.longitude = longitude


class NoMatchingFoundError(AppError):
    """Raised when the trace-matching provider returns no matching."""

    def __init__(self) -> None:
        super().__init__("No matching route found", code="NO_MATCHING_FOUND")
