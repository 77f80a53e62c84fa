"""HTTP:BL reputation query for a single IPv4 address."""

import ipaddress
import logging
from typing import Callable, Optional

from httpbl.exceptions import UnexpectedResponse
from httpbl.models.reputation_record import (
    NOT_FOUND,
    RESPONSE_MARKER,
    SEARCH_ENGINES,
    ReputationRecord,
    VisitorType,
)
from httpbl.services.dns_resolver import HttpBLResolver
from httpbl.utils.ip_utils import build_lookup_hostname, normalize_ipv4, parse_octets


logger = logging.getLogger(__name__)

# Maps a hostname to a dotted-quad answer, or echoes the hostname when unlisted
Resolver = Callable[[str], str]


class ReputationQuery:
    """Looks up an IP on Project Honey Pot's HTTP:BL and decodes the answer.

    The lookup happens once, at construction. Every accessor afterwards is a
    read of the decoded record.

    Example:
        >>> query = ReputationQuery("203.0.113.45", "abcdefghijkl", resolver)
        >>> query.lookup_hostname()
        'abcdefghijkl.45.113.0.203.dnsbl.httpbl.org'
        >>> query.is_comment_spammer()
        True
    """

    def __init__(
        self,
        ip: str | ipaddress.IPv4Address,
        access_key: str,
        resolver: Optional[Resolver] = None,
    ):
        """Validate the address, query the resolver and decode its answer.

        Args:
            ip: IPv4 address to check.
            access_key: Project Honey Pot access key.
            resolver: Hostname resolver; defaults to HttpBLResolver().

        Raises:
            InvalidAddress: If ip is not a valid IPv4 address.
            UnexpectedResponse: If the answer does not follow the 127.D.T.V
                encoding, or names a search engine index outside the table.
        """
        self._ip = normalize_ipv4(ip)
        self._access_key = access_key
        self._lookup_hostname = build_lookup_hostname(access_key, self._ip)

        if resolver is None:
            resolver = HttpBLResolver()

        logger.debug(f"Querying HTTP:BL: {self._lookup_hostname}")
        response = resolver(self._lookup_hostname)
        if response == self._lookup_hostname:
            response = NOT_FOUND
        self._raw_response = response

        octets = parse_octets(response)
        if octets is None:
            raise UnexpectedResponse(self._ip, response, "not an IPv4 answer")
        if octets[0] != RESPONSE_MARKER:
            raise UnexpectedResponse(self._ip, response)

        self._record = ReputationRecord(
            found=response != NOT_FOUND,
            last_activity_days=octets[1],
            threat_score=octets[2],
            visitor_type_bits=octets[3],
        )

        if self._record.is_search_engine() and octets[2] >= len(SEARCH_ENGINES):
            raise UnexpectedResponse(
                self._ip, response, f"unknown search engine index {octets[2]}"
            )

    @property
    def ip(self) -> str:
        return self._ip

    @property
    def access_key(self) -> str:
        return self._access_key

    @property
    def raw_response(self) -> str:
        """Resolver answer, with an echoed hostname normalized to NOT_FOUND."""
        return self._raw_response

    @property
    def record(self) -> ReputationRecord:
        return self._record

    def threat_score(self) -> int:
        """Return the 0-255 threat score; higher means more dangerous."""
        return self._record.threat_score

    def visitor_type_bits(self) -> int:
        """Return the raw visitor type bitmask.

        0 means a well-regarded search engine when a record exists; otherwise
        bit 0 is suspicious, bit 1 harvester and bit 2 comment spammer.
        """
        return self._record.visitor_type_bits

    def last_activity_days(self) -> int:
        """Return the number of days since the IP was last active."""
        return self._record.last_activity_days

    def has_record(self) -> bool:
        """Check whether Project Honey Pot has a record for the IP."""
        return self._record.found

    def is_suspicious(self) -> bool:
        return self._record.has_flag(VisitorType.SUSPICIOUS)

    def is_harvester(self) -> bool:
        return self._record.has_flag(VisitorType.HARVESTER)

    def is_comment_spammer(self) -> bool:
        return self._record.has_flag(VisitorType.COMMENT_SPAMMER)

    def is_search_engine(self) -> bool:
        """Check whether the IP belongs to a well-regarded search engine.

        A zero bitmask encodes search engines, so this never holds together
        with any of the visitor type flags.
        """
        return self._record.is_search_engine()

    def search_engine_name(self) -> str | None:
        """Return the name of the search engine using this IP.

        Returns:
            str | None: Engine name, or None if the IP is not a search engine.
        """
        if not self.is_search_engine():
            return None
        # Index range is checked at construction
        return SEARCH_ENGINES[self._record.threat_score]

    def visitor_types(self) -> list[str]:
        """Return the visitor type names encoded in the answer."""
        return self._record.visitor_types()

    def lookup_hostname(self) -> str:
        """Return the hostname used for the DNS lookup."""
        return self._lookup_hostname

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        The access key is left out since it is a credential.

        Returns:
            dict: JSON-serializable representation.
        """
        return {
            "ip": self._ip,
            "raw_response": self._raw_response,
            "has_record": self.has_record(),
            "last_activity_days": self.last_activity_days(),
            "threat_score": self.threat_score(),
            "visitor_type_bits": self.visitor_type_bits(),
            "visitor_types": self.visitor_types(),
            "search_engine": self.search_engine_name(),
        }

    def __repr__(self) -> str:
        return f"ReputationQuery(ip={self._ip!r}, raw_response={self._raw_response!r})"
