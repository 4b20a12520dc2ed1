#!/usr/bin/env python

# django-salesforce
#
# by Hyneck Cernoch and Phil Christensen
# See LICENSE.md for details
#

import os
import sys

if __name__ == "__main__":
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'dml_examples.testrunner.settings')

    from django.core.management import execute_from_command_line
    execute_from_command_line(sys.argv)
