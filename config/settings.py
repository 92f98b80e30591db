"""
Django settings for config project.
Production-ready for Render (HTTPS, Postgres via DATABASE_URL, WhiteNoise).
"""

from pathlib import Path
from datetime import timedelta
from decouple import config
import os
import dj_database_url

# ────────────────────────────────────────────────────────────────────────────────
# IA (analyse des symptômes)
# ────────────────────────────────────────────────────────────────────────────────
LLM_PROVIDER       = config("LLM_PROVIDER",       default="ollama").lower()
OLLAMA_BASE_URL    = config("OLLAMA_BASE_URL",    default="http://127.0.0.1:11434")
OLLAMA_MODEL       = config("OLLAMA_MODEL",       default="llama3.2")
ANTHROPIC_API_KEY  = config("ANTHROPIC_API_KEY",  default="")
ANTHROPIC_BASE_URL = config("ANTHROPIC_BASE_URL", default="https://api.anthropic.com/v1")
ANTHROPIC_MODEL    = config("ANTHROPIC_MODEL",    default="claude-sonnet-4-20250514")
ANTHROPIC_VERSION  = config("ANTHROPIC_VERSION",  default="2023-06-01")
LLM_TEMPERATURE    = config("LLM_TEMPERATURE",    default=0.7, cast=float)
LLM_MAX_TOKENS     = config("LLM_MAX_TOKENS",     default=1024, cast=int)
LLM_TIMEOUT        = config("LLM_TIMEOUT",        default=180, cast=int)

# Liens de partage des dossiers médicaux
SHARE_LINK_TTL_DAYS = config("SHARE_LINK_TTL_DAYS", default=7, cast=int)
FRONTEND_BASE_URL   = config("FRONTEND_BASE_URL",   default="http://localhost:3000")

# ────────────────────────────────────────────────────────────────────────────────
# Base
# ────────────────────────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config("SECRET_KEY")
DEBUG = config("DEBUG", default=False, cast=bool)

# Laisse * au début; restreins plus tard à ton domaine Render et ton front
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "*").split(",")

# ────────────────────────────────────────────────────────────────────────────────
# Applications
# ────────────────────────────────────────────────────────────────────────────────
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Apps projet
    "accounts",
    "pets",
    "triage",
    "records",

    # Tiers
    "rest_framework",
    "rest_framework_simplejwt",
    "corsheaders",
    'drf_yasg',
]

# ────────────────────────────────────────────────────────────────────────────────
# Middleware
# ────────────────────────────────────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    # WhiteNoise doit venir tôt (après Security/CORS)
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# ────────────────────────────────────────────────────────────────────────────────
# Base de données (Render ↔ DATABASE_URL recommandé)
# ────────────────────────────────────────────────────────────────────────────────
# 1) DATABASE_URL si présent (Postgres managé sur Render)
# 2) Sinon un fichier SQLite local pour le développement
DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=600,
        ssl_require=config("DB_SSL_REQUIRE", default=bool(os.getenv("DATABASE_URL")), cast=bool),
    )
}

# ────────────────────────────────────────────────────────────────────────────────
# Auth / DRF / JWT
# ────────────────────────────────────────────────────────────────────────────────
AUTH_USER_MODEL = "accounts.CustomUser"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.IsAuthenticated",
    ),
}

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=30),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=1),
    "AUTH_HEADER_TYPES": ("Bearer",),
}

# ────────────────────────────────────────────────────────────────────────────────
# Password validation
# ────────────────────────────────────────────────────────────────────────────────
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# ────────────────────────────────────────────────────────────────────────────────
# Internationalisation
# ────────────────────────────────────────────────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ────────────────────────────────────────────────────────────────────────────────
# Static & Media (WhiteNoise en prod)
# ────────────────────────────────────────────────────────────────────────────────
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ────────────────────────────────────────────────────────────────────────────────
# CORS / CSRF (à piloter via variables d'env sur Render)
# ────────────────────────────────────────────────────────────────────────────────
# Exemple d’ENV à poser sur Render :
# CORS_ALLOWED_ORIGINS="https://ton-front.com http://localhost:3000"
CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "").split()
CSRF_TRUSTED_ORIGINS = os.getenv("CSRF_TRUSTED_ORIGINS", "").split()

# ────────────────────────────────────────────────────────────────────────────────
# Sécurité & HTTPS (derrière proxy Render)
# ────────────────────────────────────────────────────────────────────────────────
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=True, cast=bool)
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ────────────────────────────────────────────────────────────────────────────────
# Logging (console-only pour Render; volume disque éphémère)
# ────────────────────────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "{levelname} {asctime} {name} - {message}", "style": "{"}
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO"},
        "triage": {"handlers": ["console"], "level": config("TRIAGE_LOG_LEVEL", default="INFO")},
        "records": {"handlers": ["console"], "level": "INFO"},
        "accounts": {"handlers": ["console"], "level": "INFO"},
    },
}
