"""
Django settings for minisearch project.

All deployment values come from the environment. The search engine URL may also be supplied by a JSON
config file (``SEARCH_CONFIG_FILE``) of the form ``{"elastic": {"url": "http://host:9200"}}``.
"""

import json
import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name, default):
    return [v.strip() for v in os.getenv(name, default).split(",") if v.strip()]


def _engine_url_from_file(path):
    try:
        with open(path, encoding="utf-8") as fp:
            return json.load(fp)["elastic"]["url"]
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise ImproperlyConfigured(f"Failed to read {path}: {e}") from e


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-insecure-secret-key")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS", "*")

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "drf_spectacular",
    "search",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.gzip.GZipMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "minisearch.urls"
ASGI_APPLICATION = "minisearch.asgi.application"
APPEND_SLASH = False

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": ["django.template.context_processors.request"]},
    }
]

# 영속 상태는 검색 엔진에만 있다
DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}

STATIC_URL = "static/"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
}

SPECTACULAR_SETTINGS = {
    "TITLE": "mini-search-engine API",
    "DESCRIPTION": "Populate synthetic users and run fuzzy multi-field searches against them.",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# Server
PORT = int(os.getenv("PORT", "8000"))
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "15"))

CORS_ALLOWED_ORIGINS = _env_list("CORS_ALLOWED_ORIGINS", "http://0.0.0.0")

# Search engine
_engine_hosts = _env_list("OPENSEARCH_URL", "http://localhost:9200")
if os.getenv("SEARCH_CONFIG_FILE"):
    _engine_hosts = [_engine_url_from_file(os.environ["SEARCH_CONFIG_FILE"])]

OPENSEARCH = {
    "ENABLED": _env_bool("OPENSEARCH_ENABLED", True),
    "HOSTS": _engine_hosts,
    "USER": os.getenv("OPENSEARCH_USER", ""),
    "PASSWORD": os.getenv("OPENSEARCH_PASSWORD", ""),
    "TIMEOUT": int(os.getenv("OPENSEARCH_TIMEOUT", "10")),
}
SEARCH_INDEX = os.getenv("SEARCH_INDEX", "users")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"}},
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "simple"}},
    "root": {"handlers": ["console"], "level": os.getenv("LOG_LEVEL", "INFO")},
}
