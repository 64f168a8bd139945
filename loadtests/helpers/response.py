"""Response error extraction for load test logging.

Handles the error shapes the Ratings API returns:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "..."}]}
- Domain errors (400/404): {"error": {"field": ["msg", ...]}}
- Storage unavailable (503): {"error": "msg"} with a Retry-After header
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Compact, human-readable message for Locust failures and log lines."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(
                f"{field}: {'; '.join(messages) if isinstance(messages, list) else messages}"
                for field, messages in error.items()
            )
        retry_after = response.headers.get("Retry-After")
        return f"{error} (retry after {retry_after}s)" if retry_after else str(error)

    return str(body)[:300]
