"""End-to-end client assertion generation and token exchange."""

import logging
from datetime import UTC, datetime

import httpx

from clientauth.core.settings import ClientAuthSettings
from clientauth.crypto.claims import build_claims
from clientauth.crypto.jws_signer import sign_assertion
from clientauth.crypto.keys import load_key_material
from clientauth.oauth.token_client import exchange_assertion
from clientauth.oauth.types import AssertionParams, TokenResponse

logger = logging.getLogger(__name__)


def params_from_settings(
    settings: ClientAuthSettings, issued_at: datetime | None = None
) -> AssertionParams:
    """Build assertion parameters from configured settings."""
    return AssertionParams(
        client_id=settings.client_id,
        issuer_url=settings.issuer_url,
        cert_path=settings.cert_path,
        key_path=settings.key_path,
        lifetime=settings.lifetime,
        issued_at=issued_at,
        thumbprint_algorithm=settings.thumbprint_algorithm,
    )


def generate_assertion(params: AssertionParams) -> str:
    """Load key material, build the claims and return the signed assertion."""
    material = load_key_material(params.cert_path, params.key_path)
    issued_at = params.issued_at or datetime.now(UTC)
    claims = build_claims(
        params.client_id, params.issuer_url, issued_at, params.lifetime
    )
    logger.debug("Client assertion payload: %s", claims.model_dump_json())
    assertion = sign_assertion(
        claims,
        material.certificate,
        material.private_key,
        params.thumbprint_algorithm,
    )
    logger.info(
        "Generated client assertion for %s (jti=%s, exp=%d)",
        claims.iss,
        claims.jti,
        claims.exp,
    )
    return assertion


def request_access_token(
    settings: ClientAuthSettings,
    *,
    client: httpx.Client | None = None,
    issued_at: datetime | None = None,
) -> TokenResponse:
    """Generate a client assertion and exchange it for an access token."""
    assertion = generate_assertion(params_from_settings(settings, issued_at))
    return exchange_assertion(
        settings.issuer_url,
        assertion,
        token_path=settings.token_endpoint_path,
        timeout=settings.http_timeout,
        ca_bundle=settings.ca_bundle,
        client=client,
    )
