import logging

from fastapi import Header, HTTPException
from firebase_admin import auth as firebase_auth

from blogforge.services.firestore import init_firebase_app

logger = logging.getLogger(__name__)


def verify_token(authorization: str = Header(None)) -> dict:
    """FastAPI dependency to verify a Firebase ID token.

    Returns the decoded token dict on success, or raises 401 on failure.
    The current user id is ``decoded["uid"]``.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")

    try:
        init_firebase_app()
        token = authorization.replace("Bearer ", "", 1)
        return firebase_auth.verify_id_token(token)
    except Exception as e:
        logger.warning("Token verification failed: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired token")


def current_user_id(decoded: dict) -> str:
    uid = decoded.get("uid")
    if not uid:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return uid
