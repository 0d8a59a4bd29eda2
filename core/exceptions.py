"""
Exception hierarchy for the HTTP clients and the query chain.

Clients raise these; the related-features service catches them at its
boundary and turns every failure into "nothing to show".
"""


class RoeblingError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(RoeblingError):
    """Exception raised when data validation fails."""


class ExternalServiceError(RoeblingError):
    """Exception raised when Overpass or Wikidata calls fail."""


class RateLimitError(ExternalServiceError):
    """Exception raised when a public service answers 429."""


RoeblingException = RoeblingError
ValidationException = ValidationError
ExternalServiceException = ExternalServiceError
RateLimitException = RateLimitError
