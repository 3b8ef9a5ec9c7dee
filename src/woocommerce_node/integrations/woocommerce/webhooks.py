"""Webhook secret derivation and signature verification for WooCommerce."""

import base64
import hashlib
import hmac

from woocommerce_node.models.credentials import WooCommerceCredentials


def get_automatic_secret(credentials: WooCommerceCredentials) -> str:
    """
    Derive a webhook secret from the store credentials.

    Used when registering webhooks without an explicit secret, so the same
    value can be recomputed later to verify deliveries.

    Args:
        credentials: Store credentials.

    Returns:
        Hex md5 digest of "consumer_key,consumer_secret".
    """
    data = f"{credentials.consumer_key},{credentials.consumer_secret}"
    return hashlib.md5(data.encode("utf-8")).hexdigest()


def verify_webhook_signature(payload: bytes, signature: str, secret: str) -> bool:
    """
    Verify a delivery's X-WC-Webhook-Signature header.

    WooCommerce signs the raw body with HMAC-SHA256 and sends the digest
    base64-encoded.

    Args:
        payload: Raw request body bytes.
        signature: Value of the X-WC-Webhook-Signature header.
        secret: Webhook secret.

    Returns:
        True if signature is valid, False otherwise.
    """
    if not signature:
        return False

    expected_signature = base64.b64encode(
        hmac.new(
            secret.encode("utf-8"),
            payload,
            hashlib.sha256,
        ).digest()
    ).decode("utf-8")

    return hmac.compare_digest(expected_signature, signature)
