"""Submission of client assertions to the authorization server token endpoint."""

import logging
import ssl

import httpx
from pydantic import ValidationError

from clientauth.core.errors import TokenExchangeError
from clientauth.core.settings import HTTP_TIMEOUT_DEFAULT, TOKEN_ENDPOINT_PATH_DEFAULT
from clientauth.oauth.types import ClientAssertionForm, TokenResponse

logger = logging.getLogger(__name__)


def build_token_endpoint(
    issuer_url: str, token_path: str = TOKEN_ENDPOINT_PATH_DEFAULT
) -> str:
    """Join the issuer URL and the token endpoint path."""
    return f"{issuer_url.rstrip('/')}{token_path}"


def _describe_error(response: httpx.Response) -> str:
    """Render the OAuth error members of a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict) or "error" not in body:
        return ""
    description = body.get("error_description")
    if description:
        return f": {body['error']} ({description})"
    return f": {body['error']}"


def _tls_context(ca_bundle: str, url: str) -> ssl.SSLContext | bool:
    if not ca_bundle:
        return True
    try:
        return ssl.create_default_context(cafile=ca_bundle)
    except (OSError, ssl.SSLError) as exc:
        raise TokenExchangeError(
            f"cannot load CA bundle {ca_bundle}: {exc}", url=url
        ) from exc


def _post(client: httpx.Client, url: str, form: ClientAssertionForm) -> httpx.Response:
    try:
        response = client.post(url, data=form.model_dump())
    except httpx.HTTPError as exc:
        raise TokenExchangeError(
            f"token request to {url} failed: {exc}", url=url
        ) from exc
    if not response.is_success:
        raise TokenExchangeError(
            f"token endpoint {url} returned HTTP {response.status_code}"
            f"{_describe_error(response)}",
            url=url,
            status_code=response.status_code,
        )
    return response


def exchange_assertion(
    issuer_url: str,
    assertion: str,
    *,
    token_path: str = TOKEN_ENDPOINT_PATH_DEFAULT,
    timeout: float = HTTP_TIMEOUT_DEFAULT,
    ca_bundle: str = "",
    client: httpx.Client | None = None,
) -> TokenResponse:
    """Exchange a signed client assertion for an access token.

    A caller-supplied ``client`` is used as-is and left open; otherwise a
    short-lived client is created with ``timeout``, trusting ``ca_bundle``
    when given and the system store otherwise.
    """
    url = build_token_endpoint(issuer_url, token_path)
    form = ClientAssertionForm(client_assertion=assertion)
    logger.info("Requesting access token from %s", url)
    if client is not None:
        response = _post(client, url, form)
    else:
        verify = _tls_context(ca_bundle, url)
        with httpx.Client(timeout=timeout, verify=verify) as owned:
            response = _post(owned, url, form)

    try:
        body = response.json()
    except ValueError as exc:
        raise TokenExchangeError(
            f"token endpoint {url} returned a non-JSON body",
            url=url,
            status_code=response.status_code,
        ) from exc
    if not isinstance(body, dict):
        raise TokenExchangeError(
            f"token endpoint {url} returned JSON that is not an object",
            url=url,
            status_code=response.status_code,
        )
    try:
        return TokenResponse.model_validate(body)
    except ValidationError as exc:
        raise TokenExchangeError(
            f"token endpoint {url} returned a malformed token response: {exc}",
            url=url,
            status_code=response.status_code,
        ) from exc
