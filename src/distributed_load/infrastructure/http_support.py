"""Response helpers shared by the HTTP adapters."""

from __future__ import annotations

import httpx

_DETAIL_KEYS = ("detail", "message")


def normalize_base_url(
    base_url: str,
    error_type: type[Exception],
    endpoint_name: str,
) -> str:
    """Strip whitespace and trailing slashes, rejecting an empty endpoint."""

    normalized = base_url.strip().rstrip("/")
    if not normalized:
        raise error_type(f"{endpoint_name} endpoint cannot be empty.")
    return normalized


def detail_from_response(response: httpx.Response) -> str:
    """Best-effort error detail from a JSON or plain-text response body."""

    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        return text or "<no response body>"

    if isinstance(payload, dict):
        for key in _DETAIL_KEYS:
            detail = payload.get(key)
            if isinstance(detail, str):
                return detail
    return str(payload)


def failure_message(response: httpx.Response) -> str:
    return (
        f"{response.request.method} {response.request.url} failed: "
        f"{response.status_code} {detail_from_response(response)}"
    )


__all__ = ["detail_from_response", "failure_message", "normalize_base_url"]
