"""Unit tests for webhook secret derivation and signature checks."""

import base64
import hashlib
import hmac

from woocommerce_node.integrations.woocommerce.webhooks import (
    get_automatic_secret,
    verify_webhook_signature,
)


def sign(payload: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


class TestAutomaticSecret:
    """Tests for the credential-derived webhook secret."""

    def test_md5_of_key_and_secret(self, credentials):
        """Test the secret is the md5 hex digest of "key,secret"."""
        expected = hashlib.md5(b"ck_test,cs_test").hexdigest()
        assert get_automatic_secret(credentials) == expected

    def test_stable_across_calls(self, credentials):
        """Test the secret can be recomputed later."""
        assert get_automatic_secret(credentials) == get_automatic_secret(credentials)


class TestVerifySignature:
    """Tests for X-WC-Webhook-Signature verification."""

    def test_valid_signature(self):
        """Test a correctly signed payload verifies."""
        payload = b'{"id": 42, "status": "processing"}'
        assert verify_webhook_signature(payload, sign(payload, "s3cret"), "s3cret")

    def test_wrong_secret(self):
        """Test a payload signed with another secret is rejected."""
        payload = b'{"id": 42}'
        assert not verify_webhook_signature(payload, sign(payload, "other"), "s3cret")

    def test_tampered_payload(self):
        """Test a modified body is rejected."""
        signature = sign(b'{"id": 42}', "s3cret")
        assert not verify_webhook_signature(b'{"id": 43}', signature, "s3cret")

    def test_missing_signature(self):
        """Test an empty header is rejected."""
        assert not verify_webhook_signature(b"{}", "", "s3cret")
