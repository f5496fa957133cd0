"""Error taxonomy for the client assertion pipeline.

Each failure carries the ``stage`` it came from so callers can report
which step broke without walking the exception chain.
"""


class ClientAuthError(Exception):
    """Base class for all client authentication failures."""

    stage = "pipeline"


class KeyMaterialError(ClientAuthError):
    """Certificate or private key could not be read or parsed."""

    stage = "load"

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class ThumbprintError(ClientAuthError):
    """Certificate thumbprint could not be computed."""

    stage = "thumbprint"

    def __init__(self, message: str, algorithm: str | None = None) -> None:
        self.algorithm = algorithm
        super().__init__(message)


class SigningError(ClientAuthError):
    """The JWS signature could not be produced."""

    stage = "sign"

    def __init__(self, message: str, algorithm: str = "RS256") -> None:
        self.algorithm = algorithm
        super().__init__(f"{algorithm}: {message}")


class TokenExchangeError(ClientAuthError):
    """The authorization server rejected the assertion or was unreachable."""

    stage = "exchange"

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)
