"""Main entry point for HTTP:BL reputation checks."""

import logging
import sys
import time

from httpbl.config import Config
from httpbl.models.lookup_result import LookupResult
from httpbl.services.dns_resolver import HttpBLResolver
from httpbl.services.logger import log_lookup, log_run_summary, setup_logging
from httpbl.services.report import ReportGenerator
from httpbl.services.reputation_checker import check_ips_concurrent


logger = logging.getLogger(__name__)


def log_result(result: LookupResult) -> None:
    """Log one lookup result."""
    query = result.query
    log_lookup(
        ip=result.ip,
        status=result.status.value,
        threat_score=query.threat_score() if query else None,
        visitor_types=query.visitor_types() if query else [],
        duration_ms=result.duration_ms,
    )


def main() -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 for success, 1 for fatal error).
    """
    start_time = time.time()

    try:
        config = Config.from_env()
    except ValueError as e:
        setup_logging(stream=sys.stderr)
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    # Logs go to stderr so stdout carries only the JSON report
    setup_logging(verbose=config.verbose, stream=sys.stderr)
    logger.info(f"Starting HTTP:BL check of {len(config.ips)} IP addresses")

    try:
        resolver = HttpBLResolver(
            timeout=config.dns_timeout,
            nameservers=config.dns_nameservers or None,
        )

        results = check_ips_concurrent(
            config.ips,
            config.access_key,
            resolver,
            concurrency=config.dns_concurrency,
        )

        duration_sec = time.time() - start_time
        for result in results:
            log_result(result)

        summary = ReportGenerator.summarize(results, config.threat_threshold)
        log_run_summary(duration_sec=duration_sec, **summary)

        print(ReportGenerator.generate_json_report(results, config.threat_threshold))

        logger.info(f"Run completed successfully in {duration_sec:.2f} seconds")
        return 0

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
