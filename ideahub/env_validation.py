"""Fail-fast checks on the process environment, run from settings on import."""
import logging
import os

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

PRODUCTION_REQUIRED = ("SECRET_KEY", "DATABASE_URL")
MIN_SECRET_KEY_LENGTH = 50


def validate_env(environ=None):
    """
    Raise ImproperlyConfigured when a production deployment would start with
    an unusable configuration. Development only gets warnings.
    """
    environ = os.environ if environ is None else environ
    is_production = environ.get("PRODUCTION", "false").lower() == "true"
    secret_key = environ.get("SECRET_KEY", "")

    if not is_production:
        if not secret_key:
            logger.warning("SECRET_KEY not set, using the development key.")
        return

    missing = [name for name in PRODUCTION_REQUIRED if not environ.get(name)]
    if missing:
        raise ImproperlyConfigured(f"Missing required production settings: {', '.join(missing)}")

    if secret_key.startswith("django-insecure") or len(secret_key) < MIN_SECRET_KEY_LENGTH:
        raise ImproperlyConfigured(
            f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters and not a django-insecure key."
        )

    if not environ.get("ALLOWED_HOSTS"):
        logger.warning("ALLOWED_HOSTS not set in production; every request will be rejected.")
