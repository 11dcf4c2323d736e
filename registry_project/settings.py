"""
Django settings for registry_project.

Values that differ between deployments are read from the environment:

    DJANGO_SECRET_KEY                           Secret key (required when DEBUG is off)
    DJANGO_DEBUG                                "1"/"true" enables debug mode
    DJANGO_ALLOWED_HOSTS                        Comma separated host names
    REGISTRY_DB_PATH                            SQLite database file
    REGISTRY_LOG_LEVEL                          Log level for registry loggers
    REGISTRY_PREFERRED_PERSON_IDENTIFIER_TYPE   Identifier type used to resolve
                                                person sponsors when the payload
                                                does not name one
"""
import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


DEBUG = _env_bool('DJANGO_DEBUG', default=True)

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', '')
if not SECRET_KEY:
    if not DEBUG:
        raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG is off")
    SECRET_KEY = 'registry-insecure-development-key'

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')
    if host.strip()
]


# Application definition

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',

    'core.reference',
    'registry.person',
    'registry.sor',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'registry_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'registry_project.wsgi.application'


# Database

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('REGISTRY_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Internationalization

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Django REST Framework

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'registry_project.response_formatter.StandardizedJSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework_xml.parsers.XMLParser',
    ],
    'EXCEPTION_HANDLER': 'registry_project.response_formatter.custom_exception_handler',
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}


# Registry

REGISTRY = {
    'PREFERRED_PERSON_IDENTIFIER_TYPE': os.environ.get(
        'REGISTRY_PREFERRED_PERSON_IDENTIFIER_TYPE', 'NETID'
    ),
}


# Logging

REGISTRY_LOG_LEVEL = os.environ.get('REGISTRY_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'core': {
            'handlers': ['console'],
            'level': REGISTRY_LOG_LEVEL,
            'propagate': False,
        },
        'registry': {
            'handlers': ['console'],
            'level': REGISTRY_LOG_LEVEL,
            'propagate': False,
        },
    },
}
