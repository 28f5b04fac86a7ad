#!/usr/bin/env python3
"""
Tests for the registrar providers and the RegistrarClient facade.
"""

import os
import unittest
from unittest.mock import Mock, patch

import requests

from domain_records_manager.core.record_manager import DomainRecordManager
from domain_records_manager.core.records import DomainRecord, RecordType
from domain_records_manager.core.resource_data import ResourceData
from domain_records_manager.errors import RegistrarAPIError, RemoteWriteError
from domain_records_manager.providers.base_provider import Domain
from domain_records_manager.providers.godaddy_provider import TEST_URL, GoDaddyProvider
from domain_records_manager.providers.mock_provider import MockRegistrarProvider
from domain_records_manager.providers.registrar_client import RegistrarClient


def make_response(status_code=200, payload=None, reason="OK"):
    response = Mock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.reason = reason
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


class TestGoDaddyProvider(unittest.TestCase):
    """Test the GoDaddy provider with a mocked requests session."""

    def setUp(self):
        """Set up test fixtures."""
        patcher = patch("domain_records_manager.providers.godaddy_provider.requests.Session")
        self.mock_session_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.session = self.mock_session_class.return_value
        self.provider = GoDaddyProvider({"key": "test-key", "secret": "test-secret"})

    def test_authorization_headers(self):
        """Test that the sso-key header is configured on the session."""
        headers = self.session.headers.update.call_args[0][0]
        self.assertEqual(headers["Authorization"], "sso-key test-key:test-secret")
        self.assertEqual(headers["Content-Type"], "application/json")
        self.assertEqual(self.provider.base_url, "https://api.godaddy.com")

    def test_get_domain(self):
        """Test resolving a domain to its numeric ID."""
        self.session.request.return_value = make_response(
            payload={"domainId": 1234, "domain": "example.com", "status": "ACTIVE"}
        )

        domain = self.provider.get_domain("", "example.com")

        self.assertEqual(domain, Domain(id=1234, name="example.com"))
        self.session.request.assert_called_once_with(
            "GET",
            "https://api.godaddy.com/v1/domains/example.com",
            json=None,
            headers={},
            timeout=30,
        )

    def test_customer_header(self):
        """Test that the customer scopes requests through X-Shopper-Id."""
        self.session.request.return_value = make_response(payload=[])

        self.provider.get_domain_records("987654", "example.com")

        kwargs = self.session.request.call_args[1]
        self.assertEqual(kwargs["headers"], {"X-Shopper-Id": "987654"})

    def test_get_domain_records(self):
        """Test parsing the record list."""
        self.session.request.return_value = make_response(
            payload=[
                {"type": "NS", "name": "@", "data": "ns1.example.com", "ttl": 3600},
                {"type": "MX", "name": "@", "data": "mail.example.com", "ttl": 600, "priority": 10},
            ]
        )

        records = self.provider.get_domain_records("", "example.com")

        self.assertEqual(
            records,
            [
                DomainRecord("@", RecordType.NS, "ns1.example.com", 3600, 0),
                DomainRecord("@", RecordType.MX, "mail.example.com", 600, 10),
            ],
        )

    def test_read_domain_with_caa_record(self):
        """Test that CAA and unlisted types do not break a read."""
        self.session.request.side_effect = [
            make_response(payload={"domainId": 1234, "domain": "example.com"}),
            make_response(
                payload=[
                    {"type": "NS", "name": "@", "data": "ns1.example.com", "ttl": 3600},
                    {"type": "CAA", "name": "@", "data": '0 issue "letsencrypt.org"', "ttl": 3600},
                    {"type": "HINFO", "name": "@", "data": "x86 linux", "ttl": 3600},
                ]
            ),
        ]
        manager = DomainRecordManager(self.provider)
        data = ResourceData({"domain": "example.com"})

        manager.read(data)

        self.assertEqual(data.id, "1234")
        self.assertEqual(data.get("nameservers"), ["ns1.example.com"])
        self.assertEqual(
            [record["type"] for record in data.get("record")], ["CAA", "HINFO"]
        )

    def test_update_domain_records(self):
        """Test that the whole record set is sent in one PUT."""
        self.session.request.return_value = make_response(payload=None)
        records = [DomainRecord("@", RecordType.A, "1.2.3.4")]

        self.provider.update_domain_records("", "example.com", records)

        self.session.request.assert_called_once_with(
            "PUT",
            "https://api.godaddy.com/v1/domains/example.com/records",
            json=[{"type": "A", "name": "@", "data": "1.2.3.4", "ttl": 3600, "priority": 0}],
            headers={},
            timeout=30,
        )

    def test_update_nameserver_validation_error(self):
        """Test that registrar error bodies become structured write errors."""
        self.session.request.return_value = make_response(
            status_code=422,
            reason="Unprocessable Entity",
            payload={"code": "FAILED_NAME_SERVER_VALIDATION", "message": "Invalid nameservers"},
        )

        with self.assertRaises(RemoteWriteError) as ctx:
            self.provider.update_domain_records("", "example.com", [])

        error = ctx.exception
        self.assertEqual(error.status_code, 422)
        self.assertTrue(error.is_nameserver_validation_failure)
        self.assertIn("422:FAILED_NAME_SERVER_VALIDATION", str(error))

    def test_not_found_error(self):
        """Test a read error without a JSON body."""
        self.session.request.return_value = make_response(
            status_code=404, reason="Not Found", payload=ValueError("no json")
        )

        with self.assertRaises(RegistrarAPIError) as ctx:
            self.provider.get_domain("", "missing.com")

        self.assertNotIsInstance(ctx.exception, RemoteWriteError)
        self.assertEqual(ctx.exception.error_code, "404:UNKNOWN")
        self.assertEqual(ctx.exception.message, "Not Found")

    def test_transport_error(self):
        """Test that transport failures are wrapped without retrying."""
        self.session.request.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(RegistrarAPIError) as ctx:
            self.provider.get_domain_records("", "example.com")

        self.assertIsNone(ctx.exception.status_code)
        self.assertEqual(self.session.request.call_count, 1)

    def test_custom_base_url(self):
        provider = GoDaddyProvider(
            {"key": "k", "secret": "s", "base_url": TEST_URL + "/", "timeout": 5}
        )
        self.assertEqual(provider.base_url, TEST_URL)
        self.assertEqual(provider.timeout, 5)

    def test_credentials_from_environment(self):
        with patch.dict(os.environ, {"GODADDY_API_KEY": "env-key", "GODADDY_API_SECRET": "env-secret"}):
            provider = GoDaddyProvider({})

        self.assertEqual(provider.key, "env-key")
        self.assertEqual(provider.secret, "env-secret")

    def test_missing_credentials(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                GoDaddyProvider({})


class TestMockRegistrarProvider(unittest.TestCase):
    """Test the mock registrar provider."""

    def setUp(self):
        """Set up test fixtures."""
        self.provider = MockRegistrarProvider({"domains": ["example.com", "example.org"]})

    def test_configured_domains(self):
        self.assertEqual(self.provider.get_domain("", "example.com"), Domain(1001, "example.com"))
        self.assertEqual(self.provider.get_domain("", "example.org").id, 1002)

    def test_replace_records(self):
        """Test that an update replaces the whole record set."""
        records = [DomainRecord("@", RecordType.A, "1.2.3.4")]
        self.provider.update_domain_records("", "example.com", records)

        self.assertEqual(self.provider.get_domain_records("", "example.com"), records)
        self.assertEqual(self.provider.writes, [records])

    def test_unknown_domain(self):
        with self.assertRaises(RegistrarAPIError) as ctx:
            self.provider.get_domain_records("", "missing.com")

        self.assertEqual(ctx.exception.error_code, "404:NOT_FOUND")

    def test_fail_next_write(self):
        """Test that a primed failure is raised once and leaves records untouched."""
        error = RemoteWriteError("rejected", status_code=422, code="INVALID_BODY")
        self.provider.fail_next_write(error)

        with self.assertRaises(RemoteWriteError):
            self.provider.update_domain_records("", "example.com", [])

        self.assertEqual(self.provider.records["example.com"], [])
        self.provider.update_domain_records("", "example.com", [])


class TestRegistrarClient(unittest.TestCase):
    """Test provider selection."""

    def test_mock_provider(self):
        client = RegistrarClient({"default_provider": "mock", "providers": {"mock": {}}})
        self.assertIsInstance(client.provider, MockRegistrarProvider)

    def test_unknown_provider_falls_back_to_mock(self):
        with self.assertLogs("domain_records_manager.providers.registrar_client", level="WARNING"):
            client = RegistrarClient({"default_provider": "route53"})

        self.assertIsInstance(client.provider, MockRegistrarProvider)

    @patch("domain_records_manager.providers.godaddy_provider.requests.Session")
    def test_godaddy_provider(self, mock_session_class):
        client = RegistrarClient(
            {"default_provider": "godaddy", "providers": {"godaddy": {"key": "k", "secret": "s"}}}
        )
        self.assertIsInstance(client.provider, GoDaddyProvider)

    def test_delegation(self):
        client = RegistrarClient({"default_provider": "mock"})
        client.provider = Mock()

        client.get_domain("c", "example.com")
        client.get_domain_records("c", "example.com")
        client.update_domain_records("c", "example.com", [])

        client.provider.get_domain.assert_called_once_with("c", "example.com")
        client.provider.get_domain_records.assert_called_once_with("c", "example.com")
        client.provider.update_domain_records.assert_called_once_with("c", "example.com", [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
