"""Configuration module for HTTP:BL reputation checks.

Loads and validates environment variables.
"""

import os
from dataclasses import dataclass
from typing import List

from httpbl.utils.ip_utils import is_valid_ipv4


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # HTTP:BL Configuration
    access_key: str
    ips: List[str]
    threat_threshold: int

    # DNS Configuration
    dns_timeout: int
    dns_concurrency: int
    dns_nameservers: List[str]

    # Operational Configuration
    verbose: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If required variables are missing or invalid.

        Returns:
            Config: Validated configuration instance.
        """
        access_key = cls._get_required_env("HTTPBL_ACCESS_KEY")

        # IPs are validated per lookup so one bad entry does not stop the run
        ips = cls._split_list(cls._get_required_env("HTTPBL_IPS"))
        if not ips:
            raise ValueError("HTTPBL_IPS must contain at least one IP address")

        threat_threshold = int(os.getenv("THREAT_THRESHOLD", "25"))
        if not 0 <= threat_threshold <= 255:
            raise ValueError("THREAT_THRESHOLD must be between 0 and 255")

        # DNS Configuration
        dns_timeout = int(os.getenv("DNS_TIMEOUT", "5"))
        if not 1 <= dns_timeout <= 60:
            raise ValueError("DNS_TIMEOUT must be between 1 and 60 seconds")

        dns_concurrency = int(os.getenv("DNS_CONCURRENCY", "10"))
        if not 1 <= dns_concurrency <= 100:
            raise ValueError("DNS_CONCURRENCY must be between 1 and 100")

        dns_nameservers = cls._split_list(os.getenv("DNS_NAMESERVERS", ""))
        for nameserver in dns_nameservers:
            if not is_valid_ipv4(nameserver):
                raise ValueError(
                    f"DNS_NAMESERVERS entry is not an IPv4 address: {nameserver}"
                )

        # Operational Configuration
        verbose_str = os.getenv("VERBOSE", "false").lower()
        verbose = verbose_str in ("true", "1", "yes")

        return cls(
            access_key=access_key,
            ips=ips,
            threat_threshold=threat_threshold,
            dns_timeout=dns_timeout,
            dns_concurrency=dns_concurrency,
            dns_nameservers=dns_nameservers,
            verbose=verbose,
        )

    @staticmethod
    def _get_required_env(key: str) -> str:
        """Get required environment variable or raise ValueError.

        Args:
            key: Environment variable name.

        Returns:
            str: Environment variable value.

        Raises:
            ValueError: If environment variable is not set or empty.
        """
        value = os.getenv(key)
        if not value:
            raise ValueError(f"Required environment variable {key} is not set")
        return value

    @staticmethod
    def _split_list(value: str) -> List[str]:
        return [item.strip() for item in value.split(",") if item.strip()]
