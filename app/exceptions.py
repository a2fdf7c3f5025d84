"""
DSS exception hierarchy

Every domain failure carries the HTTP status it maps to, so the API layer
can translate it into a JSON ``{"error": ...}`` body without per-route
branching.

- DataUnavailableError:        claims dataset failed to load (500)
- RegionNotFoundError:         unknown region id (404)
- MalformedActionRequestError: blank action id or non-object parameters (400)
- ActionTimeoutError:          action acknowledgement exceeded its timeout (504)
"""
from typing import Any, Dict, Optional


class DSSError(Exception):
    """Base exception for all DSS errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API error body."""
        return {"error": self.message}


class DataUnavailableError(DSSError):
    """The claims repository has no loaded snapshot."""

    status_code = 500

    def __init__(self, message: str = "Claims data is currently unavailable",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class RegionNotFoundError(DSSError):
    """No region with the requested id."""

    status_code = 404

    def __init__(self, region_id: str):
        super().__init__(f"State not found: {region_id}", {"region_id": region_id})
        self.region_id = region_id


class MalformedActionRequestError(DSSError):
    status_code = 400


class ActionTimeoutError(DSSError):
    status_code = 504
