"""
Token-Utilities
===============
Verifiziert die JWTs des externen Identity-Providers (REST).
HS256 mit Shared Secret oder RS256 gegen den JWKS-Endpoint des Providers.
Logging reduziert (keine sensiblen Daten).
"""

from __future__ import annotations
from app.core.config import settings
import functools
from typing import Any, Final
import httpx
from jose import jwt, JWTError
import logging
import base64
import re
import json

log = logging.getLogger("uvicorn.error")

SHARED_SECRET_ALGS: Final[tuple[str, ...]] = ("HS256",)
JWKS_ALGS: Final[tuple[str, ...]] = ("RS256",)


@functools.lru_cache(maxsize=1)
def _get_jwks() -> dict[str, Any]:
    if not settings.auth_jwks_url:
        raise JWTError("no JWKS URL configured")
    resp = httpx.get(settings.auth_jwks_url, timeout=5.0, verify=True)
    resp.raise_for_status()
    return resp.json()

def _get_key(kid: str) -> dict[str, Any]:
    for key in _get_jwks()["keys"]:
        if key.get("kid") == kid:
            return key
    raise JWTError(f"kid {kid!r} not found in JWKS")

def _safe_get_unverified_header(token: str) -> dict:
    try:
        header_b64 = token.split(".")[0]
        header_b64 = re.sub(r'[^A-Za-z0-9_\-]', '', header_b64)
        padded = header_b64 + "=" * (-len(header_b64) % 4)
        decoded = base64.urlsafe_b64decode(padded).decode("utf-8")
        return json.loads(decoded)
    except Exception as exc:
        log.debug("JWT header decode failed: %r", exc)
        raise JWTError("Header decode fail") from exc

def _resolve_key(header: dict) -> tuple[Any, tuple[str, ...]]:
    alg = header.get("alg")
    if alg in SHARED_SECRET_ALGS:
        if not settings.auth_jwt_secret:
            raise JWTError(f"alg {alg!r} requires AUTH_JWT_SECRET")
        return settings.auth_jwt_secret, SHARED_SECRET_ALGS
    if alg in JWKS_ALGS:
        # jose akzeptiert das JWK-Dict direkt als Key
        return _get_key(header.get("kid")), JWKS_ALGS
    raise JWTError(f"unsupported alg {alg!r}")

def verify_access_token(token: str) -> dict[str, Any]:
    """
    * Gibt den vollständigen Claim-Dict zurück, wenn alles passt
    * Löst ValueError aus, wenn der Token ungültig ist
    """
    try:
        header = _safe_get_unverified_header(token)
        key, algorithms = _resolve_key(header)

        options = {"verify_aud": bool(settings.auth_audience)}
        claims: dict[str, Any] = jwt.decode(
            token,
            key,
            algorithms=list(algorithms),
            issuer=settings.auth_issuer or None,
            audience=settings.auth_audience or None,
            options=options,
        )

        # Minimal-log (keine Claims)
        log.debug("JWT verified (kid=%s, alg=%s)", header.get("kid"), header.get("alg"))
        return claims

    except Exception as exc:
        log.warning("JWT verify failed: %s", exc)
        raise ValueError(str(exc)) from exc
