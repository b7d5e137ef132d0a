"""
CVR – Django Settings (Infrastructure Only)
============================================
Django serves as the HTTP container for the registry.
Registry rules live in core/ — Django does not dictate structure.

Registry parameters are read from the environment so the
authority never lives in source for real deployments.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("CVR_SECRET_KEY", "cvr-dev-key-replace-before-deployment")

DEBUG = os.environ.get("CVR_DEBUG", "1") == "1"

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("CVR_ALLOWED_HOSTS", "").split(",")
    if host.strip()
]

# ── Installed Apps ────────────────────────────────────────────
# The registry is in-memory; no models, no migrations.
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# ── Database ──────────────────────────────────────────────────
# Registry state is not persisted by this service.
DATABASES = {}

# ── Registry ──────────────────────────────────────────────────
CVR_REGISTRY = {
    "AUTHORITY": os.environ.get(
        "CVR_REGISTRY_AUTHORITY",
        "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
    ),
    "GENESIS_BLOCK_HEIGHT": os.environ.get("CVR_GENESIS_BLOCK_HEIGHT", "0"),
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "cvr": {
            "handlers": ["console"],
            "level": os.environ.get("CVR_LOG_LEVEL", "INFO"),
        },
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
