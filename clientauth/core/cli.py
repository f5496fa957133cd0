"""Command line entry point for generating and exchanging client assertions."""

from typing import Annotated

import typer
from pydantic import ValidationError

from clientauth.core.errors import ClientAuthError
from clientauth.core.log_config import configure_logging
from clientauth.core.settings import ClientAuthSettings
from clientauth.oauth.assertion_service import (
    generate_assertion,
    params_from_settings,
    request_access_token,
)

app = typer.Typer(help="private_key_jwt client authentication.")

ClientIdOpt = Annotated[str | None, typer.Option("--client-id", help="OAuth client id.")]
IssuerOpt = Annotated[str | None, typer.Option("--issuer", help="Issuer (realm) URL.")]
CertOpt = Annotated[str | None, typer.Option("--cert", help="PEM certificate path.")]
KeyOpt = Annotated[str | None, typer.Option("--key", help="PKCS#8 PEM key path.")]
LifetimeOpt = Annotated[
    int | None, typer.Option("--lifetime", min=1, help="Assertion lifetime in seconds.")
]
ThumbprintOpt = Annotated[
    str | None, typer.Option("--thumbprint-alg", help="SHA-1 (x5t) or SHA-256 (x5t#S256).")
]


def _load_settings(**overrides: object) -> ClientAuthSettings:
    """Read settings from the environment and apply non-empty CLI overrides."""
    updates = {k: v for k, v in overrides.items() if v is not None}
    try:
        settings = ClientAuthSettings(**updates)
    except ValidationError as exc:
        typer.secho(f"config failed: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2) from exc
    configure_logging(settings.log_level)
    return settings


def _fail(exc: ClientAuthError) -> typer.Exit:
    typer.secho(f"{exc.stage} failed: {exc}", err=True, fg=typer.colors.RED)
    return typer.Exit(code=1)


@app.command()
def assertion(
    client_id: ClientIdOpt = None,
    issuer: IssuerOpt = None,
    cert: CertOpt = None,
    key: KeyOpt = None,
    lifetime: LifetimeOpt = None,
    thumbprint_alg: ThumbprintOpt = None,
) -> None:
    """Print a signed client assertion."""
    settings = _load_settings(
        client_id=client_id,
        issuer_url=issuer,
        cert_path=cert,
        key_path=key,
        token_lifetime=lifetime,
        thumbprint_algorithm=thumbprint_alg,
    )
    try:
        token = generate_assertion(params_from_settings(settings))
    except ClientAuthError as exc:
        raise _fail(exc) from exc
    typer.echo(token)


@app.command()
def token(
    client_id: ClientIdOpt = None,
    issuer: IssuerOpt = None,
    cert: CertOpt = None,
    key: KeyOpt = None,
    lifetime: LifetimeOpt = None,
    thumbprint_alg: ThumbprintOpt = None,
) -> None:
    """Exchange a client assertion for an access token and print it."""
    settings = _load_settings(
        client_id=client_id,
        issuer_url=issuer,
        cert_path=cert,
        key_path=key,
        token_lifetime=lifetime,
        thumbprint_algorithm=thumbprint_alg,
    )
    try:
        response = request_access_token(settings)
    except ClientAuthError as exc:
        raise _fail(exc) from exc
    if response.access_token is None:
        typer.secho(
            "exchange failed: response has no access_token",
            err=True,
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)
    typer.echo(response.access_token)


if __name__ == "__main__":
    app()
