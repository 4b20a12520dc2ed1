"""
Run one DML example against the Salesforce database.

    python manage.py dml_example insert_new_account
    python manage.py dml_example create_account "Acme" Technology
    python manage.py dml_example upsert_opportunities Acme "Deal A" "Deal B"
    python manage.py dml_example create_and_delete_cases 001A000001abcdeAAA 3
"""
import logging

import requests
from django.core.exceptions import ObjectDoesNotExist
from django.core.management.base import BaseCommand, CommandError
from salesforce.dbapi.exceptions import SalesforceError

from dml_examples import dml
from dml_examples.models import Contact, Opportunity

log = logging.getLogger(__name__)


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise ValueError(value)
    return number


def load_all(model, ids):
    """Load records of `model` in the order of `ids`, all must exist."""
    found = {str(obj.pk): obj for obj in model.objects.filter(pk__in=ids)}
    missing = [x for x in ids if x not in found]
    if missing:
        raise model.DoesNotExist("%s matching query does not exist: %s"
                                 % (model._meta.object_name, ', '.join(missing)))
    return [found[x] for x in ids]


class Command(BaseCommand):
    help = "Run one example of insert, update, upsert or delete on Salesforce standard objects."

    def add_arguments(self, parser):
        subparsers = parser.add_subparsers(dest='operation', required=True, metavar='operation')

        subparsers.add_parser('insert_new_account', help="Insert an Account with a fixed name.")

        sub = subparsers.add_parser('create_account', help="Insert an Account.")
        sub.add_argument('name')
        sub.add_argument('industry', nargs='?')

        sub = subparsers.add_parser('insert_new_contact', help="Insert a Contact of the Account.")
        sub.add_argument('account_id')

        sub = subparsers.add_parser('update_contact_last_name', help="Change the last name of a Contact.")
        sub.add_argument('contact_id')
        sub.add_argument('new_last_name')

        sub = subparsers.add_parser('update_opportunity_stage', help="Change the stage of an Opportunity.")
        sub.add_argument('opp_id')
        sub.add_argument('new_stage')

        sub = subparsers.add_parser('update_account_fields', help="Change the name and industry of an Account.")
        sub.add_argument('account_id')
        sub.add_argument('new_name')
        sub.add_argument('new_industry', nargs='?')

        sub = subparsers.add_parser('upsert_opportunity_list', help="Qualify existing Opportunities.")
        sub.add_argument('opp_ids', nargs='+', metavar='opp_id')

        sub = subparsers.add_parser('upsert_opportunities',
                                    help="Create or update Opportunities of the Account with the name.")
        sub.add_argument('account_name')
        sub.add_argument('opp_names', nargs='+', metavar='opp_name')

        sub = subparsers.add_parser('upsert_account', help="Create or update the Account with the name.")
        sub.add_argument('account_name')

        sub = subparsers.add_parser('upsert_accounts_with_contacts',
                                    help="Relate Contacts to Accounts named by their last names.")
        sub.add_argument('contact_ids', nargs='+', metavar='contact_id')

        sub = subparsers.add_parser('insert_and_delete_leads', help="Insert Leads and delete them.")
        sub.add_argument('names', nargs='+', metavar='name')

        sub = subparsers.add_parser('create_and_delete_cases', help="Insert Cases of the Account and delete them.")
        sub.add_argument('account_id')
        sub.add_argument('num_of_cases', type=non_negative_int)

    def handle(self, *args, **options):
        operation = options['operation']
        log.debug("Running %s", operation)
        try:
            getattr(self, 'run_' + operation)(options)
        except ObjectDoesNotExist as exc:
            raise CommandError(str(exc))
        except (SalesforceError, requests.exceptions.ConnectionError) as exc:
            raise CommandError("%s failed: %s" % (operation, exc))

    def run_insert_new_account(self, options):
        self.stdout.write(str(dml.insert_new_account()))

    def run_create_account(self, options):
        dml.create_account(options['name'], options['industry'])
        self.stdout.write("Created Account %r" % options['name'])

    def run_insert_new_contact(self, options):
        self.stdout.write(str(dml.insert_new_contact(options['account_id'])))

    def run_update_contact_last_name(self, options):
        contact = dml.update_contact_last_name(options['contact_id'], options['new_last_name'])
        self.write_record(contact)

    def run_update_opportunity_stage(self, options):
        opportunity = dml.update_opportunity_stage(options['opp_id'], options['new_stage'])
        self.write_record(opportunity)

    def run_update_account_fields(self, options):
        account = dml.update_account_fields(options['account_id'], options['new_name'], options['new_industry'])
        self.write_record(account)

    def run_upsert_opportunity_list(self, options):
        opportunities = load_all(Opportunity, options['opp_ids'])
        for opportunity in dml.upsert_opportunity_list(opportunities):
            self.write_record(opportunity)

    def run_upsert_opportunities(self, options):
        for opportunity in dml.upsert_opportunities(options['account_name'], options['opp_names']):
            self.write_record(opportunity)

    def run_upsert_account(self, options):
        self.write_record(dml.upsert_account(options['account_name']))

    def run_upsert_accounts_with_contacts(self, options):
        contacts = load_all(Contact, options['contact_ids'])
        for contact in dml.upsert_accounts_with_contacts(contacts):
            self.stdout.write("%s %s -> Account %s" % (contact.pk, contact, contact.account_id))

    def run_insert_and_delete_leads(self, options):
        leads = dml.insert_and_delete_leads(options['names'])
        self.stdout.write("Inserted and deleted %d Leads" % len(leads))

    def run_create_and_delete_cases(self, options):
        deleted = dml.create_and_delete_cases(options['account_id'], options['num_of_cases'])
        self.stdout.write("Deleted %d Cases" % deleted)

    def write_record(self, obj):
        self.stdout.write("%s %s" % (obj.pk, obj))
