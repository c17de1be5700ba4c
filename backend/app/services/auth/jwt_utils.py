# 📁 backend/app/services/auth/jwt_utils.py
from fastapi import HTTPException, status

def extract_owner_id_from_payload(payload: dict) -> str:
    """
    Extrahiert die Owner-Identität aus dem bereits verifizierten JWT-Payload.
    Leere oder fehlende Claims → 401.
    """
    owner = (
        payload.get("sub")
        or payload.get("preferred_username")
        or payload.get("email")
    )
    if not isinstance(owner, str) or not owner.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Identity claim missing in token"
        )
    return owner
