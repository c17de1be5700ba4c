# 📁 backend/app/services/auth/dependencies.py
"""
Auth-Dependencies für FastAPI-Endpoints.

* prüft Bearer-Token des externen Identity-Providers
* liefert die Owner-ID für Endpoints
* `get_optional_request_user` liefert None statt 401 (für reine Lese-Endpoints)
"""

from __future__ import annotations

from fastapi import HTTPException, status, Header

from app.services.auth.jwt_utils import extract_owner_id_from_payload
from app.services.auth.token import verify_access_token


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization.removeprefix("Bearer ").strip()
    return token or None


# --------------------------------------------------------------------------- #
# 1) Pflicht-Login – für schreibende Routes
# --------------------------------------------------------------------------- #
async def get_current_request_user(  # noqa: D401 (FastAPI-Namenskonvention)
    authorization: str | None = Header(default=None),
) -> str:
    """
    Liefert die Owner-ID aus dem gültigen JWT,
    sonst → 401 UNAUTHORIZED.
    """
    token = _bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Must be logged in",
        )

    try:
        payload = verify_access_token(token)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return extract_owner_id_from_payload(payload)


# --------------------------------------------------------------------------- #
# 2) Optionaler Login – anonyme Aufrufer bekommen None
# --------------------------------------------------------------------------- #
async def get_optional_request_user(
    authorization: str | None = Header(default=None),
) -> str | None:
    token = _bearer_token(authorization)
    if not token:
        return None
    try:
        payload = verify_access_token(token)
    except ValueError:
        return None
    try:
        return extract_owner_id_from_payload(payload)
    except HTTPException:
        return None
