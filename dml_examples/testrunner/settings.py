# Django settings for running the DML examples against a Salesforce org.
from typing import Any, Dict, Tuple, Union
import os

DEBUG = True

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': 'dml_examples_db',
    },
    # The variable DATABASES should be redefined in local_settings with details
    # in order to protect private secret values from unintentional committing.
    'salesforce': {
        'ENGINE': 'salesforce.backend',
        "CONSUMER_KEY": os.environ.get('SF_CONSUMER_KEY', ''),
        "CONSUMER_SECRET": os.environ.get('SF_CONSUMER_SECRET', ''),
        'USER': os.environ.get('SF_USER', ''),
        'PASSWORD': os.environ.get('SF_PASSWORD', ''),
        'HOST': os.environ.get('SF_HOST', 'https://login.salesforce.com'),
        'TEST': {
            'DEPENDENCIES': [],
            'MIGRATE': False,
        },
    }
}  # type: Dict[str, Any]

# Local time zone for this installation.
TIME_ZONE = 'America/New_York'
USE_TZ = True
# Time zone of the Salesforce organization. Close dates of Opportunities are
# computed from "today" in this zone. (TIME_ZONE is used if it is not set)
SF_ORG_TIME_ZONE = os.environ.get('SF_ORG_TIME_ZONE', '')

LANGUAGE_CODE = 'en-us'
USE_I18N = True

# Make this unique, and don't share it with anybody.
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dml-examples-insecure-key')

INSTALLED_APPS = [
    'salesforce',
    'dml_examples',
]
DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'  # not important for Salesforce, but for Django warnings

SALESFORCE_DB_ALIAS = 'salesforce'
# Timeouts tuple: (waiting for connection, waiting for data) in seconds
SALESFORCE_QUERY_TIMEOUT = (4, 15)  # type: Union[float, Tuple[float, float]]
DATABASE_ROUTERS = [
    "salesforce.router.ModelRouter"
]
# Don't connect to Salesforce before the first request, e.g. by "manage.py check".
SF_LAZY_CONNECT = True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
            "level": "DEBUG",
        },
    },
    'loggers': {
        'salesforce': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': True,
        },
        'dml_examples': {
            'handlers': ['console'],
            'level': os.environ.get('DML_EXAMPLES_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}

try:
    from dml_examples.testrunner.local_settings import *  # NOQA pylint:disable=unused-wildcard-import,wildcard-import
except ImportError:
    pass
