"""DNS resolver collaborator for HTTP:BL queries."""

import logging
from typing import Optional

import dns.exception
import dns.resolver


logger = logging.getLogger(__name__)


def categorize_failure(exception: Exception) -> str:
    """Categorize DNS failure into specific failure type.

    Args:
        exception: The DNS exception that occurred.

    Returns:
        str: One of: timeout, nxdomain, no_answer, no_nameservers, unknown_error.
    """
    if isinstance(exception, dns.exception.Timeout):
        return "timeout"
    elif isinstance(exception, dns.resolver.NXDOMAIN):
        # Unlisted IPs have no A record in the zone
        return "nxdomain"
    elif isinstance(exception, dns.resolver.NoAnswer):
        return "no_answer"
    elif isinstance(exception, dns.resolver.NoNameservers):
        return "no_nameservers"
    else:
        return "unknown_error"


class HttpBLResolver:
    """Resolves HTTP:BL query hostnames to their A record.

    Follows the gethostbyname convention: when there is no address for the
    hostname, the hostname itself is returned. Transport failures are logged
    and reported the same way, so callers see them as "no record".

    Example:
        >>> resolver = HttpBLResolver(timeout=3)
        >>> resolver("abcdefghijkl.1.1.1.127.dnsbl.httpbl.org")
        '127.1.1.1'
    """

    def __init__(self, timeout: int = 5, nameservers: Optional[list[str]] = None):
        """Initialize resolver.

        Args:
            timeout: Total query lifetime in seconds.
            nameservers: Nameserver IPs to use instead of the system ones.
        """
        self.timeout = timeout
        self.nameservers = list(nameservers) if nameservers else None

    def _create_resolver(self) -> dns.resolver.Resolver:
        resolver = dns.resolver.Resolver()
        resolver.lifetime = self.timeout  # Total timeout for query
        if self.nameservers:
            resolver.nameservers = self.nameservers
        return resolver

    def __call__(self, hostname: str) -> str:
        """Resolve hostname to a dotted-quad address.

        Args:
            hostname: HTTP:BL query hostname.

        Returns:
            str: First A record of hostname, or hostname if none was found.
        """
        resolver = self._create_resolver()

        try:
            answers = resolver.resolve(hostname, "A")
            return str(answers[0])

        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            # Definitive "not listed" response
            return hostname

        except dns.exception.DNSException as e:
            # Timeout, SERVFAIL or unreachable nameservers.
            # The first label is the access key, keep it out of the logs.
            query_name = hostname.split(".", 1)[-1]
            logger.warning(
                f"DNS lookup failed for {query_name}: {type(e).__name__}",
                extra={"failure_type": categorize_failure(e)},
            )
            return hostname
