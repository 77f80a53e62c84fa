"""Unit tests for the HttpBLResolver collaborator."""

import logging
from unittest.mock import MagicMock, patch

import dns.exception
import dns.resolver
import pytest

from httpbl.services.dns_resolver import HttpBLResolver, categorize_failure


HOSTNAME = "abcdefghijkl.45.113.0.203.dnsbl.httpbl.org"


class TestCategorizeFailure:
    """Test categorize_failure() mapping."""

    @pytest.mark.parametrize(
        "exception, expected",
        [
            (dns.exception.Timeout(), "timeout"),
            (dns.resolver.NXDOMAIN(), "nxdomain"),
            (dns.resolver.NoAnswer(), "no_answer"),
            (dns.resolver.NoNameservers(), "no_nameservers"),
            (dns.exception.DNSException(), "unknown_error"),
            (RuntimeError("boom"), "unknown_error"),
        ],
    )
    def test_categories(self, exception, expected):
        assert categorize_failure(exception) == expected


class TestHttpBLResolver:
    """Test HttpBLResolver.__call__()."""

    @patch("httpbl.services.dns_resolver.dns.resolver.Resolver")
    def test_returns_first_a_record(self, mock_resolver_class):
        mock_resolver = MagicMock()
        mock_resolver.resolve.return_value = ["127.1.80.1"]
        mock_resolver_class.return_value = mock_resolver

        assert HttpBLResolver(timeout=3)(HOSTNAME) == "127.1.80.1"
        mock_resolver.resolve.assert_called_once_with(HOSTNAME, "A")
        assert mock_resolver.lifetime == 3

    @patch("httpbl.services.dns_resolver.dns.resolver.Resolver")
    def test_custom_nameservers(self, mock_resolver_class):
        mock_resolver = MagicMock()
        mock_resolver.resolve.return_value = ["127.1.1.1"]
        mock_resolver_class.return_value = mock_resolver

        HttpBLResolver(nameservers=["192.0.2.53"])(HOSTNAME)

        assert mock_resolver.nameservers == ["192.0.2.53"]

    @pytest.mark.parametrize(
        "exception", [dns.resolver.NXDOMAIN(), dns.resolver.NoAnswer()]
    )
    @patch("httpbl.services.dns_resolver.dns.resolver.Resolver")
    def test_unlisted_echoes_hostname(self, mock_resolver_class, exception):
        mock_resolver = MagicMock()
        mock_resolver.resolve.side_effect = exception
        mock_resolver_class.return_value = mock_resolver

        assert HttpBLResolver()(HOSTNAME) == HOSTNAME

    @patch("httpbl.services.dns_resolver.dns.resolver.Resolver")
    def test_timeout_echoes_hostname_and_warns(self, mock_resolver_class, caplog):
        mock_resolver = MagicMock()
        mock_resolver.resolve.side_effect = dns.exception.Timeout()
        mock_resolver_class.return_value = mock_resolver

        with caplog.at_level(logging.WARNING):
            assert HttpBLResolver()(HOSTNAME) == HOSTNAME

        assert len(caplog.records) == 1
        assert caplog.records[0].failure_type == "timeout"
        # Access key must not leak into logs
        assert "abcdefghijkl" not in caplog.text

    @patch("httpbl.services.dns_resolver.dns.resolver.Resolver")
    def test_no_nameservers_echoes_hostname(self, mock_resolver_class):
        mock_resolver = MagicMock()
        mock_resolver.resolve.side_effect = dns.resolver.NoNameservers()
        mock_resolver_class.return_value = mock_resolver

        assert HttpBLResolver()(HOSTNAME) == HOSTNAME
