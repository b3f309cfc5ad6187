"""
db/firebase.py

Process-wide Firebase client handles.
The default app is initialized once on first use and never torn down.
"""

import json
import threading

import firebase_admin
import structlog
from firebase_admin import credentials, firestore

from config import settings

logger = structlog.get_logger(__name__)

_init_lock = threading.Lock()


def get_app() -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first call.

    Safe to call from worker threads; only one initialization can win.
    """
    with _init_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            return _initialize_app()


def _initialize_app() -> firebase_admin.App:
    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    if settings.firebase_service_account_json:
        cred = credentials.Certificate(
            json.loads(settings.firebase_service_account_json)
        )
        source = "service_account"
    else:
        cred = credentials.ApplicationDefault()
        source = "application_default"

    app = firebase_admin.initialize_app(cred, options or None)
    logger.info(
        "firebase_initialized",
        credential_source=source,
        project_id=settings.firebase_project_id or None,
    )
    return app


def get_firestore():
    """Return the Firestore client bound to the default app."""
    return firestore.client(get_app())
