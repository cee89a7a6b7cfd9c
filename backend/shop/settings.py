import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent
# Try root project .env (one directory up from BASE_DIR) first, then local
root_env = (BASE_DIR.parent / '.env')
local_env = (BASE_DIR / '.env')
if root_env.exists():
    load_dotenv(root_env)
elif local_env.exists():
    load_dotenv(local_env)

# ---------------------------------------------------------------------------
# SECRET KEY HANDLING
# Prefer DJANGO_SECRET_KEY, fall back to SECRET_KEY for broader compatibility.
# In production (DEBUG=False) we require a non-default, non-empty key.
# ---------------------------------------------------------------------------
_candidate_key = (
    os.getenv('DJANGO_SECRET_KEY')
    or os.getenv('SECRET_KEY')
    or ''
)

SECRET_KEY = _candidate_key if _candidate_key else 'dev-secret-key'
DEBUG = os.getenv('DEBUG', 'True') == 'True'
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', '*').split(',')

if (not SECRET_KEY or SECRET_KEY == 'dev-secret-key') and not DEBUG:
    raise ImproperlyConfigured(
        'SECRET_KEY is missing or using insecure default. Set DJANGO_SECRET_KEY or SECRET_KEY env var.'
    )

# ---------------------------------------------------------------------------
# BEARER TOKENS
# Tokens are stateless: a signed {userId, iat} claim set. The signing key is
# injected here once per process; an unusable key stops the process at boot.
# ---------------------------------------------------------------------------
SUPPORTED_TOKEN_ALGORITHMS = ('HS256', 'HS384', 'HS512')

TOKEN_SIGNING_KEY = os.getenv('TOKEN_SIGNING_KEY') or SECRET_KEY
TOKEN_ALGORITHM = os.getenv('TOKEN_ALGORITHM', 'HS256')
_token_lifetime = os.getenv('TOKEN_LIFETIME_SECONDS', '').strip()
# None disables expiry entirely (tokens stay valid until the key rotates)
TOKEN_LIFETIME_SECONDS = int(_token_lifetime) if _token_lifetime else None
AUTH_HEADER_SCHEME = os.getenv('AUTH_HEADER_SCHEME', 'Bearer')

if not TOKEN_SIGNING_KEY:
    raise ImproperlyConfigured('TOKEN_SIGNING_KEY must not be empty.')
if TOKEN_ALGORITHM not in SUPPORTED_TOKEN_ALGORITHMS:
    raise ImproperlyConfigured(
        f'TOKEN_ALGORITHM must be one of {", ".join(SUPPORTED_TOKEN_ALGORITHMS)}.'
    )
if TOKEN_LIFETIME_SECONDS is not None and TOKEN_LIFETIME_SECONDS <= 0:
    raise ImproperlyConfigured('TOKEN_LIFETIME_SECONDS must be a positive integer.')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'apps.common',
    'apps.users',
    'apps.catalog',
    'apps.carts',
    'apps.auth.apps.AuthConfig',
]

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    # Authentication is owned by apps.api.middleware.AuthGateMiddleware
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'apps.api.exceptions.global_exception_handler',
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Shop API',
    'DESCRIPTION': 'Shopping cart backend with bearer-token authentication.',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'SCHEMA_PATH_PREFIX': r'/api',
    'SERVE_PERMISSIONS': [],
}

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'apps.api.middleware.AuthGateMiddleware',
]

ROOT_URLCONF = 'shop.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'shop.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.getenv('POSTGRES_DB', 'shop'),
        'USER': os.getenv('POSTGRES_USER', 'shop'),
        'PASSWORD': os.getenv('POSTGRES_PASSWORD', 'shop'),
        'HOST': os.getenv('POSTGRES_HOST', 'db'),
        'PORT': os.getenv('POSTGRES_PORT', '5432'),
    }
}

"""Caching configuration.
Redis backs the product list cache. Cache exceptions are ignored so a Redis
outage only costs a database round trip."""
REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/1')
CACHE_TTL = int(os.getenv('CACHE_TTL', '300'))  # seconds

CACHES = {
    'default': {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': REDIS_URL,
        'OPTIONS': {
            'CLIENT_CLASS': 'django_redis.client.DefaultClient',
            'IGNORE_EXCEPTIONS': True,
        },
        'KEY_PREFIX': os.getenv('CACHE_KEY_PREFIX', 'shop'),
        'TIMEOUT': CACHE_TTL,
    }
}

LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django.db.backends': {
            'level': 'INFO',
        },
    },
}

# Use SQLite for tests to simplify CI/dev without Postgres
USING_PYTEST = (
    os.getenv('PYTEST_CURRENT_TEST') is not None
    or 'pytest' in sys.modules
    or any(os.path.basename(arg).startswith('pytest') for arg in sys.argv)
)

if 'test' in sys.argv or USING_PYTEST:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'shop-test-cache',
            'TIMEOUT': 60,
        }
    }
    PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = os.getenv('STATIC_ROOT', str(BASE_DIR / 'staticfiles'))
STATICFILES_DIRS = [BASE_DIR / 'static'] if (BASE_DIR / 'static').exists() else []
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
