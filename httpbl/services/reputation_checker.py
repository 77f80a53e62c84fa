"""Batch HTTP:BL checks for many IPs."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone

from httpbl.exceptions import HttpBLError
from httpbl.models.lookup_result import LookupResult, LookupStatus
from httpbl.services.reputation_query import Resolver, ReputationQuery


logger = logging.getLogger(__name__)


def check_ip(ip: str, access_key: str, resolver: Resolver) -> LookupResult:
    """Check single IP against HTTP:BL.

    Args:
        ip: IPv4 address to check.
        access_key: Project Honey Pot access key.
        resolver: Hostname resolver collaborator.

    Returns:
        LookupResult: LISTED, NOT_LISTED, or INVALID with the error message.
    """
    start = time.monotonic()
    try:
        query = ReputationQuery(ip, access_key, resolver)
    except HttpBLError as e:
        logger.warning(f"HTTP:BL lookup failed for {ip}: {e}")
        return LookupResult(
            ip=ip,
            status=LookupStatus.INVALID,
            query=None,
            error=str(e),
            timestamp=datetime.now(timezone.utc),
            duration_ms=int((time.monotonic() - start) * 1000),
        )

    status = LookupStatus.LISTED if query.has_record() else LookupStatus.NOT_LISTED
    return LookupResult(
        ip=ip,
        status=status,
        query=query,
        error="",
        timestamp=datetime.now(timezone.utc),
        duration_ms=int((time.monotonic() - start) * 1000),
    )


def check_ips_concurrent(
    ips: list[str],
    access_key: str,
    resolver: Resolver,
    concurrency: int = 10,
) -> list[LookupResult]:
    """Check multiple IPs against HTTP:BL concurrently.

    Each IP gets its own independent query; results come back in input order.

    Args:
        ips: IPv4 addresses to check.
        access_key: Project Honey Pot access key.
        resolver: Hostname resolver collaborator.
        concurrency: Max concurrent DNS queries.

    Returns:
        list[LookupResult]: One result per input IP.
    """
    results: list[LookupResult | None] = [None] * len(ips)

    with ThreadPoolExecutor(max_workers=concurrency) as executor:
        futures = {
            executor.submit(check_ip, ip, access_key, resolver): index
            for index, ip in enumerate(ips)
        }

        # Collect results as they complete
        for future in as_completed(futures):
            index = futures[future]
            try:
                results[index] = future.result()
            except Exception as e:
                # Unexpected error from the resolver - treat as INVALID
                ip = ips[index]
                logger.error(f"Unexpected error checking {ip}: {e}")
                results[index] = LookupResult(
                    ip=ip,
                    status=LookupStatus.INVALID,
                    query=None,
                    error=f"Exception: {e}",
                    timestamp=datetime.now(timezone.utc),
                )

    return results  # type: ignore[return-value]
