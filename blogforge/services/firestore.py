import os
import json
import logging
import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)

_db = None


def init_firebase_app():
    """
    Initialize the Firebase app once, in two modes:
    1. Hosted: credentials are inside GOOGLE_APPLICATION_CREDENTIALS_JSON
    2. Local: GOOGLE_APPLICATION_CREDENTIALS points to a JSON file
    """
    if len(firebase_admin._apps):
        return firebase_admin.get_app()

    # --- Hosted mode: JSON stored inside an environment variable ---
    json_str = os.getenv("GOOGLE_APPLICATION_CREDENTIALS_JSON")

    if json_str:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError:
            raise ValueError("GOOGLE_APPLICATION_CREDENTIALS_JSON contains invalid JSON.")
        logger.info("Initializing Firebase from GOOGLE_APPLICATION_CREDENTIALS_JSON")
        return firebase_admin.initialize_app(credentials.Certificate(data))

    # --- Local mode: JSON file stored on your machine ---
    json_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")

    if json_path and os.path.exists(json_path):
        logger.info("Initializing Firebase from %s", json_path)
        return firebase_admin.initialize_app(credentials.Certificate(json_path))

    raise ValueError(
        "No Firebase credentials found.\n"
        "Set GOOGLE_APPLICATION_CREDENTIALS_JSON (hosted) or "
        "GOOGLE_APPLICATION_CREDENTIALS pointing to a file (local)."
    )


def get_db():
    """Firestore client, created on first use."""
    global _db
    if _db is None:
        init_firebase_app()
        _db = firestore.client()
    return _db
