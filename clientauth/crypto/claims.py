"""Client assertion claim set construction."""

from datetime import datetime, timedelta

import uuid_utils

from clientauth.crypto.types import ClaimSet


def new_jti() -> str:
    """Generate a random JWT ID backed by the OS CSPRNG."""
    return str(uuid_utils.uuid4())


def build_claims(
    client_id: str,
    issuer_url: str,
    issued_at: datetime,
    lifetime: timedelta,
) -> ClaimSet:
    """Assemble the claims asserting ``client_id`` to the issuer at ``issuer_url``."""
    iat = int(issued_at.timestamp())
    return ClaimSet(
        iss=client_id,
        sub=client_id,
        aud=issuer_url,
        iat=iat,
        exp=iat + int(lifetime.total_seconds()),
        jti=new_jti(),
    )
