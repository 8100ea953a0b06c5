from pathlib import Path
from decouple import AutoConfig, Config, RepositoryEnv, Csv
import os

BASE_DIR = Path(__file__).resolve().parent.parent

# Loading environment variables
env_path = os.path.join(BASE_DIR, '.env.local') if os.path.exists(os.path.join(BASE_DIR, '.env.local')) else os.path.join(BASE_DIR, '.env')
config = Config(RepositoryEnv(env_path)) if os.path.exists(env_path) else AutoConfig(search_path=BASE_DIR)

SECRET_KEY = config('SECRET_KEY', default='django-insecure-secret-key-replace-me')

DEBUG = config('DEBUG', default=True, cast=bool)

ALLOWED_HOSTS = ['*'] if DEBUG else config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third party
    'rest_framework',
    'django_htmx',

    # Local Apps
    'apps.core',
    'apps.master',
    'apps.pricing',
    'apps.transactions',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'django_htmx.middleware.HtmxMiddleware',
]

ROOT_URLCONF = 'erp_portal.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'apps.core.context_processors.global_settings',
            ],
        },
    },
]

WSGI_APPLICATION = 'erp_portal.wsgi.application'

# The portal owns no business data; the database only backs sessions.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

SESSION_ENGINE = config('SESSION_ENGINE', default='django.contrib.sessions.backends.db')
MESSAGE_STORAGE = 'django.contrib.messages.storage.fallback.FallbackStorage'

# Shared by every web process and the celery worker that warms the lookups.
CACHES = {
    'default': {
        'BACKEND': config('CACHE_BACKEND', default='django.core.cache.backends.redis.RedisCache'),
        'LOCATION': config('CACHE_LOCATION', default='redis://localhost:6379/1'),
        'KEY_PREFIX': 'erp-portal',
    }
}

CSRF_TRUSTED_ORIGINS = config('CSRF_TRUSTED_ORIGINS', default='', cast=Csv()) if not DEBUG else []

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Jakarta'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ERP backend
API_UPSTREAM_URL = config('API_UPSTREAM_URL', default='https://backend-erp-warehouse.vercel.app').rstrip('/')
# NEXT_PUBLIC_API_BASE_URL is still honoured so existing deployments keep working.
# Unset, pages call the same upstream the /api/ proxy forwards to.
API_BASE_URL = config(
    'API_BASE_URL',
    default=config('NEXT_PUBLIC_API_BASE_URL', default=f'{API_UPSTREAM_URL}/api/v1'),
).rstrip('/')
API_TIMEOUT = config('API_TIMEOUT', default=15.0, cast=float)
API_MAX_WORKERS = config('API_MAX_WORKERS', default=6, cast=int)

PAGE_SIZE = config('PAGE_SIZE', default=5, cast=int)
LOOKUP_CACHE_TTL = config('LOOKUP_CACHE_TTL', default=300, cast=int)

# Logging
LOG_LEVEL = config('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'apps': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'erp_portal': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
    },
}

# Celery
CELERY_BROKER_URL = config('CELERY_BROKER_URL', default='redis://localhost:6379/0')
CELERY_RESULT_BACKEND = config('CELERY_RESULT_BACKEND', default='redis://localhost:6379/0')
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_BROKER_CONNECTION_RETRY_ON_STARTUP = True

from celery.schedules import crontab

CELERY_BEAT_SCHEDULE = {
    'warm-lookup-cache': {
        'task': 'apps.core.tasks.warm_lookup_cache',
        'schedule': crontab(minute='*/5'),
    },
}
