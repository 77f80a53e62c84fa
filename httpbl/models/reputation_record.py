"""HTTP:BL reputation record and protocol tables."""

from dataclasses import dataclass
from enum import IntFlag


# Resolver answer meaning "no record for this IP"
NOT_FOUND = "127.0.0.1"

# Leading octet of every valid HTTP:BL answer
RESPONSE_MARKER = 127

# Visitor type value reserved for well-regarded search engines
SEARCH_ENGINE = 0

# Indexed by the threat score octet when the visitor type is SEARCH_ENGINE
SEARCH_ENGINES = (
    "Undocumented",
    "AltaVista",
    "Ask",
    "Baidu",
    "Excite",
    "Google",
    "Looksmart",
    "Lycos",
    "MSN",
    "Yahoo",
    "Cull",
    "Infoseek",
    "Miscellaneous",
)


class VisitorType(IntFlag):
    """Visitor type bits of the fourth answer octet."""

    SUSPICIOUS = 1
    HARVESTER = 2
    COMMENT_SPAMMER = 4


# Names used in logs and reports, in bit order
VISITOR_TYPE_NAMES = {
    VisitorType.SUSPICIOUS: "suspicious",
    VisitorType.HARVESTER: "harvester",
    VisitorType.COMMENT_SPAMMER: "comment_spammer",
}


@dataclass(frozen=True)
class ReputationRecord:
    """Decoded HTTP:BL answer for a single IP.

    Attributes:
        found: False when the service has no record (answer was NOT_FOUND).
        last_activity_days: Days since the IP was last seen (second octet).
        threat_score: 0-255 danger rating (third octet), or the search engine
            index when visitor_type_bits is SEARCH_ENGINE.
        visitor_type_bits: Visitor type bitmask (fourth octet).
    """

    found: bool
    last_activity_days: int
    threat_score: int
    visitor_type_bits: int

    def has_flag(self, flag: VisitorType) -> bool:
        """Check whether a visitor type bit is set on a found record.

        Args:
            flag: Visitor type bit to test.

        Returns:
            bool: True if the record exists and the bit is set.
        """
        return self.found and (self.visitor_type_bits & flag) != 0

    def is_search_engine(self) -> bool:
        return self.found and self.visitor_type_bits == SEARCH_ENGINE

    def visitor_types(self) -> list[str]:
        """List the visitor type names encoded in the record.

        Returns:
            list[str]: ["search_engine"] for a zero bitmask, the names of the
            set bits otherwise, or [] when there is no record.
        """
        if not self.found:
            return []
        if self.is_search_engine():
            return ["search_engine"]
        return [name for flag, name in VISITOR_TYPE_NAMES.items() if self.has_flag(flag)]
