"""Type definitions for key material, claims, and JWS headers."""

from typing import Literal, Self

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509 import Certificate
from pydantic import BaseModel, ConfigDict, model_validator


class KeyMaterial(BaseModel):
    """Certificate and matching private key loaded for one assertion."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    certificate: Certificate
    private_key: RSAPrivateKey


class ClaimSet(BaseModel):
    """Registered claims of a private_key_jwt client assertion."""

    model_config = ConfigDict(frozen=True)

    iss: str
    sub: str
    aud: str
    iat: int
    exp: int
    jti: str

    @model_validator(mode="after")
    def _check_consistency(self) -> Self:
        if self.sub != self.iss:
            raise ValueError("sub must equal iss for a client assertion")
        if self.exp <= self.iat:
            raise ValueError("exp must be later than iat")
        return self


class JWSHeader(BaseModel):
    """Protected header of the signed assertion."""

    model_config = ConfigDict(frozen=True)

    alg: Literal["RS256"] = "RS256"
    typ: Literal["JWT"] = "JWT"
    thumbprint: str
    thumbprint_param: Literal["x5t", "x5t#S256"] = "x5t"

    def as_dict(self) -> dict[str, str]:
        """Render the header as JOSE parameters."""
        return {
            "alg": self.alg,
            "typ": self.typ,
            self.thumbprint_param: self.thumbprint,
        }
