"""Application settings read from environment variables."""

import os


class AppConfig:
    """Centralized application configuration."""

    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development").lower()
    SERVICE_NAME = os.environ.get("SERVICE_NAME", "homefinder-backend")
    SEED_AGENTS = os.environ.get("SEED_AGENTS", "true").lower() == "true"
    PASSWORD_HASH_ITERATIONS = int(os.environ.get("PASSWORD_HASH_ITERATIONS", "260000"))
    DEFAULT_SORT = os.environ.get("DEFAULT_SORT", "newest")