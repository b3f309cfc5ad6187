"""
config.py

Centralized configuration management using pydantic-settings.
All modules must import settings from this file.
Direct os.getenv() calls are prohibited elsewhere.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings loaded from .env file."""

    # Firebase
    firebase_project_id: str = ""
    firebase_service_account_json: str = ""  # empty -> Application Default Credentials

    # Firestore collections
    alerts_collection: str = "emergency_alerts"
    users_collection: str = "users"
    interactions_parent_collection: str = "alerts"
    interactions_subcollection: str = "interactions"

    # Attribution
    default_sender_id: str = "system"
    default_sender_name: str = "RescueTN"
    broadcast_sender_name: str = "RescueTN Admin"

    # Push decoration
    webpush_icon_url: str = "https://rescuetn.example.com/icon.png"
    webpush_badge_url: str = "https://rescuetn.example.com/badge.png"
    android_ttl_seconds: int = 86400

    # HTTP gateway
    cors_allow_origins: list[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
