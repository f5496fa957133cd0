"""Shared test fixtures for jwt-client-auth."""

from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from tests.support import CLIENT_ID, ISSUER, ClientFiles, write_client


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    """One RSA-2048 key shared across the session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def rsa_client(tmp_path: Path, rsa_key: rsa.RSAPrivateKey) -> ClientFiles:
    """Self-signed RSA certificate and PKCS#8 key written to disk."""
    return write_client(tmp_path / "rsa", rsa_key, CLIENT_ID)


@pytest.fixture
def ec_client(tmp_path: Path) -> ClientFiles:
    """Self-signed EC P-256 certificate and PKCS#8 key written to disk."""
    key = ec.generate_private_key(ec.SECP256R1())
    return write_client(tmp_path / "ec", key, "ec-client")


@pytest.fixture
def other_rsa_key() -> rsa.RSAPrivateKey:
    """An RSA key unrelated to ``rsa_client``."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Point settings at the temporary key material."""
    monkeypatch.setenv("CLIENT_AUTH_CLIENT_ID", CLIENT_ID)
    monkeypatch.setenv("CLIENT_AUTH_ISSUER_URL", ISSUER)
    monkeypatch.setenv("CLIENT_AUTH_CERT_PATH", str(tmp_path / "rsa" / "client_cert.pem"))
    monkeypatch.setenv("CLIENT_AUTH_KEY_PATH", str(tmp_path / "rsa" / "client_key.pem"))
