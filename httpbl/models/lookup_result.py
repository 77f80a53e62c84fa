"""Lookup result models for batch HTTP:BL checks."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from httpbl.services.reputation_query import ReputationQuery


class LookupStatus(Enum):
    """HTTP:BL lookup outcome classification."""

    LISTED = "LISTED"  # Project Honey Pot has a record for the IP
    NOT_LISTED = "NOT_LISTED"  # No record (127.0.0.1 or no DNS answer)
    INVALID = "INVALID"  # Bad input address or non-conforming answer


@dataclass
class LookupResult:
    """Result of a single HTTP:BL lookup.

    Attributes:
        ip: IP address that was checked, as given.
        status: Classification of the lookup.
        query: Decoded query, None when status is INVALID.
        error: Error description, empty unless status is INVALID.
        timestamp: When the lookup completed.
        duration_ms: Time spent on the lookup in milliseconds.
    """

    ip: str
    status: LookupStatus
    query: Optional["ReputationQuery"]
    error: str
    timestamp: datetime
    duration_ms: int = 0

    def is_listed(self) -> bool:
        """Check if IP has a record on HTTP:BL.

        Returns:
            bool: True if status is LISTED, False otherwise.
        """
        return self.status == LookupStatus.LISTED

    def is_invalid(self) -> bool:
        """Check if the lookup failed.

        Returns:
            bool: True if status is INVALID, False otherwise.
        """
        return self.status == LookupStatus.INVALID

    def is_threat(self, threshold: int) -> bool:
        """Check if IP is a listed non-search-engine at or above threshold.

        Args:
            threshold: Minimum threat score (0-255).

        Returns:
            bool: True if the IP should be treated as a threat.
        """
        if not self.is_listed() or self.query is None:
            return False
        if self.query.is_search_engine():
            return False
        return self.query.threat_score() >= threshold

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: JSON-serializable representation.
        """
        data = {
            "ip": self.ip,
            "status": self.status.value,
            "error": self.error,
            "timestamp": self.timestamp.isoformat(),
            "duration_ms": self.duration_ms,
        }
        if self.query is not None:
            data.update(self.query.to_json())
        return data
