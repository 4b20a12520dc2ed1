from unittest import mock
import datetime

import pytz
from django.test import TestCase
from django.test.utils import override_settings

from dml_examples import utils
from dml_examples.models import Account, Contact


class AddMonthsTest(TestCase):
    def test_add_months(self) -> None:
        self.assertEqual(utils.add_months(datetime.date(2024, 1, 15), 3), datetime.date(2024, 4, 15))
        self.assertEqual(utils.add_months(datetime.date(2024, 11, 15), 3), datetime.date(2025, 2, 15))
        self.assertEqual(utils.add_months(datetime.date(2024, 1, 15), 0), datetime.date(2024, 1, 15))
        self.assertEqual(utils.add_months(datetime.date(2024, 1, 15), -1), datetime.date(2023, 12, 15))

    def test_add_months_end_of_month(self) -> None:
        self.assertEqual(utils.add_months(datetime.date(2024, 11, 30), 3), datetime.date(2025, 2, 28))
        self.assertEqual(utils.add_months(datetime.date(2023, 11, 30), 3), datetime.date(2024, 2, 29))
        self.assertEqual(utils.add_months(datetime.date(2024, 3, 31), 1), datetime.date(2024, 4, 30))


class TodayTest(TestCase):
    # 2024-03-01 03:00 UTC is still 2024-02-29 in New York
    utc_now = datetime.datetime(2024, 3, 1, 3, 0, tzinfo=pytz.utc)

    def today(self) -> datetime.date:
        with mock.patch('dml_examples.utils.datetime') as mock_datetime:
            mock_datetime.datetime.now.return_value = self.utc_now
            return utils.today()

    @override_settings(SF_ORG_TIME_ZONE='America/New_York')
    def test_org_time_zone(self) -> None:
        self.assertEqual(self.today(), datetime.date(2024, 2, 29))

    @override_settings(SF_ORG_TIME_ZONE='Europe/Prague')
    def test_org_time_zone_east(self) -> None:
        self.assertEqual(self.today(), datetime.date(2024, 3, 1))

    @override_settings(SF_ORG_TIME_ZONE='', TIME_ZONE='America/Los_Angeles')
    def test_default_time_zone(self) -> None:
        self.assertEqual(utils.org_timezone(), pytz.timezone('America/Los_Angeles'))
        self.assertEqual(self.today(), datetime.date(2024, 2, 29))


class UpsertTest(TestCase):
    def test_insert_and_update(self) -> None:
        old = Account.objects.create(name='sf_test old')
        old.name = 'sf_test old 2'
        old.industry = 'Banking'
        new = Account(name='sf_test new')
        ret = utils.upsert([old, new], ['name'])
        self.assertEqual(len(ret), 2)
        self.assertEqual(Account.objects.count(), 2)
        old = Account.objects.get(pk=old.pk)
        # only the listed fields are updated
        self.assertEqual((old.name, old.industry), ('sf_test old 2', None))
        self.assertEqual(Account.objects.filter(name='sf_test new').count(), 1)

    def test_empty(self) -> None:
        self.assertEqual(utils.upsert([], ['name']), [])
        self.assertEqual(utils.upsert(iter([]), ['name']), [])

    def test_mixed_models(self) -> None:
        with self.assertRaises(TypeError):
            utils.upsert([Account(name='sf_test'), Contact(last_name='sf_test')], ['name'])
        self.assertEqual(Account.objects.count(), 0)
