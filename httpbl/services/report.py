"""Report generation for HTTP:BL batch runs."""

import json
from datetime import datetime, timezone
from typing import List

from httpbl.models.lookup_result import LookupResult


class ReportGenerator:
    """Generates formatted reports from lookup results."""

    @staticmethod
    def summarize(results: List[LookupResult], threshold: int) -> dict:
        """Count lookup outcomes.

        Args:
            results: Lookup results of one run.
            threshold: Minimum threat score for an IP to count as a threat.

        Returns:
            dict: Counts keyed by total_ips, listed, not_listed, invalid, threats.
        """
        listed = sum(1 for r in results if r.is_listed())
        invalid = sum(1 for r in results if r.is_invalid())
        return {
            "total_ips": len(results),
            "listed": listed,
            "not_listed": len(results) - listed - invalid,
            "invalid": invalid,
            "threats": sum(1 for r in results if r.is_threat(threshold)),
        }

    @staticmethod
    def to_json(results: List[LookupResult], threshold: int) -> dict:
        return {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "threat_threshold": threshold,
            "summary": ReportGenerator.summarize(results, threshold),
            "results": [r.to_json() for r in results],
        }

    @staticmethod
    def generate_json_report(results: List[LookupResult], threshold: int) -> str:
        """Generate JSON-formatted run report.

        Args:
            results: Lookup results of one run.
            threshold: Minimum threat score for an IP to count as a threat.

        Returns:
            str: Pretty-printed JSON string with sorted keys for determinism.

        Example:
            >>> print(ReportGenerator.generate_json_report(results, 25))
            {
              "generated_at": "2026-01-05T10:30:00+00:00",
              "results": [...],
              "summary": {...},
              "threat_threshold": 25
            }
        """
        return json.dumps(
            ReportGenerator.to_json(results, threshold), indent=2, sort_keys=True
        )
