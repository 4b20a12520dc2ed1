# django-salesforce
#
# by Hyneck Cernoch and Phil Christensen
# See LICENSE.md for details
#

"""
Small helpers shared by the DML examples: dates in the org time zone and
a batch upsert.
"""
from typing import Iterable, List, Sequence, TypeVar
import calendar
import datetime
import logging

import pytz
from django.conf import settings
from django.db import router
from django.db.models import Model

log = logging.getLogger(__name__)

_M = TypeVar('_M', bound=Model)


def org_timezone() -> datetime.tzinfo:
    """Time zone of the Salesforce organization (settings.SF_ORG_TIME_ZONE or TIME_ZONE)"""
    name = getattr(settings, 'SF_ORG_TIME_ZONE', None) or settings.TIME_ZONE or 'UTC'
    return pytz.timezone(name)


def today() -> datetime.date:
    """The current date in the org time zone, used for Opportunity close dates."""
    return datetime.datetime.now(pytz.utc).astimezone(org_timezone()).date()


def add_months(date: datetime.date, months: int) -> datetime.date:
    """Add calendar months, the day is clamped to the end of the target month.

    >>> add_months(datetime.date(2024, 11, 30), 3)
    datetime.date(2025, 2, 28)
    """
    month_index = date.month - 1 + months
    year = date.year + month_index // 12
    month = month_index % 12 + 1
    day = min(date.day, calendar.monthrange(year, month)[1])
    return date.replace(year=year, month=month, day=day)


def upsert(objs: Iterable[_M], fields: Sequence[str]) -> List[_M]:
    """Insert objects without a primary key and update the others.

    All objects must be of the same model. New objects are created by one
    `bulk_create`, existing ones are saved by one `bulk_update` of `fields`.
    (Both are sObject Collections requests on a Salesforce database.)
    Objects built in memory with a known Id are bound to the database of
    the model first. (Salesforce `bulk_update` accepts only objects bound
    to a Salesforce database.)
    """
    objs = list(objs)
    if not objs:
        return objs
    model = type(objs[0])
    if any(type(x) is not model for x in objs):  # pylint:disable=unidiomatic-typecheck
        raise TypeError("All upserted objects must be of the same model.")
    new_objs = [x for x in objs if x.pk is None]
    old_objs = [x for x in objs if x.pk is not None]
    if new_objs:
        model.objects.bulk_create(new_objs)
        log.info("Inserted %d %s: %s", len(new_objs), model._meta.db_table,  # pylint:disable=protected-access
                 [x.pk for x in new_objs])
    if old_objs:
        db = router.db_for_write(model)
        for obj in old_objs:
            if obj._state.db is None:  # pylint:disable=protected-access
                obj._state.db = db  # pylint:disable=protected-access
                obj._state.adding = False  # pylint:disable=protected-access
        model.objects.bulk_update(old_objs, fields)
        log.info("Updated %d %s: %s", len(old_objs), model._meta.db_table,  # pylint:disable=protected-access
                 [x.pk for x in old_objs])
    return objs
