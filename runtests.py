#!/usr/bin/env python
# Run the tests of DML examples on a local SQLite database, no Salesforce org is needed.
#   python runtests.py [test labels]

import os
import sys

import django
from django.conf import settings
from django.test.utils import get_runner


def runtests(test_labels):
    os.environ['DJANGO_SETTINGS_MODULE'] = 'tests.test_default_db.settings'
    django.setup()
    test_runner = get_runner(settings)(verbosity=2, interactive=False)
    failures = test_runner.run_tests(test_labels or ['tests'])
    sys.exit(bool(failures))


if __name__ == '__main__':
    runtests(sys.argv[1:])
