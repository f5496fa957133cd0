"""Type definitions for the client_credentials token exchange."""

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, ConfigDict

CLIENT_CREDENTIALS = "client_credentials"
JWT_BEARER_ASSERTION = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"


class ClientAssertionForm(BaseModel):
    """Form body of a private_key_jwt client_credentials request."""

    grant_type: Literal["client_credentials"] = CLIENT_CREDENTIALS
    client_assertion_type: Literal[
        "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"
    ] = JWT_BEARER_ASSERTION
    client_assertion: str


class TokenResponse(BaseModel):
    """OAuth token endpoint response, other members kept as-is."""

    model_config = ConfigDict(extra="allow")

    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    scope: str | None = None


class AssertionParams(BaseModel):
    """Inputs for generating one signed client assertion."""

    client_id: str
    issuer_url: str
    cert_path: str
    key_path: str
    lifetime: timedelta
    issued_at: datetime | None = None
    thumbprint_algorithm: str = "SHA-1"
