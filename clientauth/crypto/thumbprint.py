"""X.509 certificate thumbprints for the JWS ``x5t`` header parameters."""

import base64

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from clientauth.core.errors import ThumbprintError

SHA1 = "SHA-1"
SHA256 = "SHA-256"

# RFC 7515 4.1.7 / 4.1.8
_ALGORITHMS: dict[str, tuple[type[hashes.HashAlgorithm], str]] = {
    SHA1: (hashes.SHA1, "x5t"),
    SHA256: (hashes.SHA256, "x5t#S256"),
}


def _lookup(hash_algorithm: str) -> tuple[type[hashes.HashAlgorithm], str]:
    try:
        return _ALGORITHMS[hash_algorithm.upper()]
    except KeyError:
        raise ThumbprintError(
            f"unsupported thumbprint algorithm {hash_algorithm!r}",
            hash_algorithm,
        ) from None


def thumbprint_header_param(hash_algorithm: str = SHA1) -> str:
    """Return the JWS header parameter that carries a thumbprint of this kind."""
    return _lookup(hash_algorithm)[1]


def compute_thumbprint(
    certificate: x509.Certificate, hash_algorithm: str = SHA1
) -> str:
    """Digest the certificate's DER encoding and base64url-encode it unpadded.

    Only certificates embedding an RSA public key are accepted, since the
    assertion is always signed with RS256.
    """
    hash_cls, _ = _lookup(hash_algorithm)
    try:
        public_key = certificate.public_key()
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise ThumbprintError(
            f"certificate public key cannot be parsed: {exc}", hash_algorithm
        ) from exc
    if not isinstance(public_key, RSAPublicKey):
        raise ThumbprintError(
            f"certificate does not embed an RSA public key ({type(public_key).__name__})",
            hash_algorithm,
        )
    digest = certificate.fingerprint(hash_cls())
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()
