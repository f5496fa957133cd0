"""Client settings loaded from environment variables."""

from datetime import timedelta
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_LIFETIME_DEFAULT = 86_400
HTTP_TIMEOUT_DEFAULT = 10.0
TOKEN_ENDPOINT_PATH_DEFAULT = "/protocol/openid-connect/token"


class ClientAuthSettings(BaseSettings):
    """Client identity, key material locations, and token endpoint settings."""

    model_config = SettingsConfigDict(env_prefix="CLIENT_AUTH_")

    client_id: str = "acme-service-client-jwt-auth"
    issuer_url: str = "https://id.acme.test:8443/auth/realms/acme-internal"
    cert_path: str = "client_cert.pem"
    key_path: str = "client_key.pem"
    token_lifetime: int = Field(default=TOKEN_LIFETIME_DEFAULT, gt=0)
    thumbprint_algorithm: Literal["SHA-1", "SHA-256"] = "SHA-1"
    token_endpoint_path: str = TOKEN_ENDPOINT_PATH_DEFAULT
    http_timeout: float = HTTP_TIMEOUT_DEFAULT
    ca_bundle: str = ""
    log_level: str = "INFO"

    @property
    def lifetime(self) -> timedelta:
        """Assertion lifetime as a timedelta."""
        return timedelta(seconds=self.token_lifetime)

