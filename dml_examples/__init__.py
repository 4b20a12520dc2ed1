# django-salesforce
#
# by Hyneck Cernoch and Phil Christensen
# See LICENSE.md for details
#

"""
Examples of basic DML operations on Salesforce standard objects.

Every function in `dml_examples.dml` is an independent example that builds
records, saves them by the Django ORM through the django-salesforce backend
and optionally queries or deletes them.
"""
import logging

__version__ = "1.0"

log = logging.getLogger(__name__)
