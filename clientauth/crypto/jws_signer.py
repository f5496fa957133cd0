"""RS256 compact JWS signing of client assertions."""

import logging

import jwt
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from clientauth.core.errors import SigningError
from clientauth.crypto.thumbprint import (
    SHA1,
    compute_thumbprint,
    thumbprint_header_param,
)
from clientauth.crypto.types import ClaimSet, JWSHeader

logger = logging.getLogger(__name__)

RS256 = "RS256"
MIN_RSA_KEY_SIZE = 2048


def build_header(
    certificate: x509.Certificate, thumbprint_algorithm: str = SHA1
) -> JWSHeader:
    """Build the protected header binding the assertion to ``certificate``."""
    return JWSHeader(
        thumbprint=compute_thumbprint(certificate, thumbprint_algorithm),
        thumbprint_param=thumbprint_header_param(thumbprint_algorithm),
    )


def _check_key(private_key: object) -> RSAPrivateKey:
    if not isinstance(private_key, RSAPrivateKey):
        raise SigningError(
            f"expected an RSA private key, got {type(private_key).__name__}"
        )
    if private_key.key_size < MIN_RSA_KEY_SIZE:
        raise SigningError(
            f"RSA key is {private_key.key_size} bits, need at least {MIN_RSA_KEY_SIZE}"
        )
    return private_key


def _check_pair(certificate: x509.Certificate, private_key: RSAPrivateKey) -> None:
    cert_numbers = certificate.public_key().public_numbers()
    key_numbers = private_key.public_key().public_numbers()
    if cert_numbers != key_numbers:
        raise SigningError("private key does not match the certificate public key")


def sign_assertion(
    claims: ClaimSet,
    certificate: x509.Certificate,
    private_key: RSAPrivateKey,
    thumbprint_algorithm: str = SHA1,
) -> str:
    """Sign ``claims`` and return the compact ``header.payload.signature`` form.

    The payload is serialized in claim order with compact separators and
    the header carries ``alg``, ``typ`` and the certificate thumbprint.
    """
    header = build_header(certificate, thumbprint_algorithm)
    key = _check_key(private_key)
    _check_pair(certificate, key)
    try:
        token = jwt.encode(
            claims.model_dump(),
            key,
            algorithm=RS256,
            headers=header.as_dict(),
        )
    except (jwt.PyJWTError, UnsupportedAlgorithm, TypeError, ValueError) as exc:
        raise SigningError(f"signature failed: {exc}") from exc
    logger.debug("Signed assertion jti=%s with %s", claims.jti, header.thumbprint_param)
    return token
