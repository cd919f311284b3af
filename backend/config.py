import os
from dotenv import load_dotenv

load_dotenv()


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and ((value[0] == '"' and value[-1] == '"') or (value[0] == "'" and value[-1] == "'")):
        value = value[1:-1]
    # Some env providers leak literal escaped control chars.
    return value.replace("\\n", "").replace("\\r", "").strip()


def env_value(name: str, fallback: str = "") -> str:
    return sanitize_env_value(os.getenv(name), fallback)


def env_flag(name: str, default: bool = False) -> bool:
    """Parse 1/0, true/false, yes/no, on/off style flags."""
    value = env_value(name).lower()
    if not value:
        return default
    return value in {'1', 'true', 'yes', 'on'}


class Config:
    """Application settings"""
    SECRET_KEY = env_value('SECRET_KEY', 'storefront-dev-secret-key')

    # API
    API_PREFIX = '/api'

    # CORS allowlist (comma-separated origins)
    # Example:
    # CORS_ALLOWED_ORIGINS=https://shop.example.com,https://admin.example.com
    CORS_ALLOWED_ORIGINS = [
        origin.strip()
        for origin in env_value('CORS_ALLOWED_ORIGINS').split(',')
        if origin.strip()
    ]

    FLASK_ENV = env_value('FLASK_ENV', 'development')

    # Start with the sample catalog loaded
    SEED_CATALOG = env_flag('SEED_CATALOG', default=True)

    LOG_LEVEL = env_value('LOG_LEVEL', 'INFO').upper() or 'INFO'


class TestingConfig(Config):
    TESTING = True
    SEED_CATALOG = True
