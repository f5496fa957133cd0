"""Key material builders shared by the test suite."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.x509.oid import NameOID

CLIENT_ID = "acme-service-client-jwt-auth"
ISSUER = "https://id.acme.test:8443/auth/realms/acme-internal"


@dataclass
class ClientFiles:
    """PEM files written for one test client."""

    cert_path: Path
    key_path: Path
    certificate: x509.Certificate
    private_key: rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey


def self_signed(private_key, common_name: str) -> x509.Certificate:
    """Issue a one-year self-signed certificate for ``private_key``."""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(UTC)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=365))
        .sign(private_key, hashes.SHA256())
    )


def pkcs8_pem(private_key) -> bytes:
    """Serialize a private key as unencrypted PKCS#8 PEM."""
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def write_client(directory: Path, private_key, common_name: str) -> ClientFiles:
    """Write ``client_cert.pem`` and ``client_key.pem`` into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    cert = self_signed(private_key, common_name)
    cert_path = directory / "client_cert.pem"
    key_path = directory / "client_key.pem"
    cert_path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    key_path.write_bytes(pkcs8_pem(private_key))
    return ClientFiles(cert_path, key_path, cert, private_key)
