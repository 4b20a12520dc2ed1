# django-salesforce
#
# by Hyneck Cernoch and Phil Christensen
# See LICENSE.md for details
#

"""
Examples of Create / Update / Upsert / Delete on Salesforce standard objects.

Every function is independent. No error is handled here: a lookup by Id that
matches nothing raises `Model.DoesNotExist` and a record rejected by
Salesforce raises `salesforce.SalesforceError`.

Example:
    >>> account_id = insert_new_account()
    >>> contact_id = insert_new_contact(account_id)
    >>> update_contact_last_name(contact_id, 'Smith')
"""
from decimal import Decimal
from typing import Iterable, List, Optional
import datetime
import logging

from dml_examples.models import Account, Case, Contact, Lead, Opportunity
from dml_examples.utils import add_months, today, upsert

log = logging.getLogger(__name__)

SAMPLE_ACCOUNT_NAME = 'Sample Account'
SAMPLE_CONTACT_FIRST_NAME = 'Sample'
SAMPLE_CONTACT_LAST_NAME = 'Contact'
SAMPLE_LEAD_COMPANY = 'Sample Company'
NEW_ACCOUNT_DESCRIPTION = 'New Account'
UPDATED_ACCOUNT_DESCRIPTION = 'Updated Account'


# Insert

def insert_new_account() -> str:
    """Create one Account with a fixed name and return its Id."""
    account = Account(name=SAMPLE_ACCOUNT_NAME)
    account.save()
    log.info("Inserted Account %s", account.pk)
    return account.pk


def create_account(name: str, industry: Optional[str]) -> None:
    account = Account.objects.create(name=name, industry=industry)
    log.info("Inserted Account %s %r", account.pk, name)


def insert_new_contact(account_id: str) -> str:
    """Create one Contact related to the Account `account_id` and return its Id.

    The relationship is set by the foreign key value only, the Account is not
    read. Salesforce rejects the insert if the Account does not exist.
    """
    contact = Contact(first_name=SAMPLE_CONTACT_FIRST_NAME, last_name=SAMPLE_CONTACT_LAST_NAME,
                      account_id=account_id)
    contact.save()
    log.info("Inserted Contact %s for Account %s", contact.pk, account_id)
    return contact.pk


# Update

def update_contact_last_name(contact_id: str, new_last_name: str) -> Contact:
    contact = Contact.objects.get(pk=contact_id)
    contact.last_name = new_last_name
    contact.save(update_fields=['last_name'])
    log.info("Updated Contact %s last_name=%r", contact.pk, new_last_name)
    return contact


def update_opportunity_stage(opp_id: str, new_stage: str) -> Opportunity:
    opportunity = Opportunity.objects.get(pk=opp_id)
    opportunity.stage = new_stage
    opportunity.save(update_fields=['stage'])
    log.info("Updated Opportunity %s stage=%r", opportunity.pk, new_stage)
    return opportunity


def update_account_fields(account_id: str, new_name: str, new_industry: Optional[str]) -> Account:
    account = Account.objects.get(pk=account_id)
    account.name = new_name
    account.industry = new_industry
    account.save(update_fields=['name', 'industry'])
    log.info("Updated Account %s name=%r industry=%r", account.pk, new_name, new_industry)
    return account


# Upsert

def upsert_opportunity_list(opportunities: Iterable[Opportunity]) -> List[Opportunity]:
    """Qualify all Opportunities and save them by one upsert.

    Every Opportunity gets the stage "Qualification", a close date three months
    from today and the amount 50000. Opportunities without an Id are inserted,
    the others are updated.
    """
    opportunities = list(opportunities)
    close_date = add_months(today(), 3)
    for opportunity in opportunities:
        opportunity.stage = 'Qualification'
        opportunity.close_date = close_date
        opportunity.amount = Decimal(50000)
    return upsert(opportunities, ['stage', 'close_date', 'amount'])


def upsert_opportunities(account_name: str, opp_names: Iterable[str]) -> List[Opportunity]:
    """Make sure that the Account has an Opportunity "Prospecting" of every name.

    The Account is found by name or created. An existing Opportunity of the
    Account with a requested name is updated, a missing one is created, both
    with the stage "Prospecting" and a close date 30 days from today.
    """
    account = Account.objects.filter(name=account_name).first()
    if account is None:
        account = Account.objects.create(name=account_name)
        log.info("Inserted Account %s %r", account.pk, account_name)
    existing = {opp.name: opp for opp in Opportunity.objects.filter(account=account)}
    log.debug("Found %d Opportunities of Account %s", len(existing), account.pk)

    close_date = today() + datetime.timedelta(days=30)
    batch = []
    for name in opp_names:
        opportunity = existing.get(name)
        if opportunity is None:
            opportunity = Opportunity(name=name, account=account)
            existing[name] = opportunity
        elif opportunity in batch:
            continue
        opportunity.stage = 'Prospecting'
        opportunity.close_date = close_date
        batch.append(opportunity)
    return upsert(batch, ['stage', 'close_date'])


def upsert_account(account_name: str) -> Account:
    account = Account.objects.filter(name=account_name).first()
    if account is not None:
        account.description = UPDATED_ACCOUNT_DESCRIPTION
    else:
        account = Account(name=account_name, description=NEW_ACCOUNT_DESCRIPTION)
    account.save()
    log.info("Upserted Account %s %r (%s)", account.pk, account_name, account.description)
    return account


def account_name_for_contact(contact: Contact) -> str:
    return '%s Account' % contact.last_name


def upsert_accounts_with_contacts(contacts: Iterable[Contact]) -> List[Contact]:
    """Relate every Contact to an Account named by the Contact's last name.

    The Account "<LastName> Account" is upserted by `upsert_account` and then
    all Contacts are saved by one upsert.
    """
    contacts = list(contacts)
    for contact in contacts:
        contact.account = upsert_account(account_name_for_contact(contact))
    return upsert(contacts, ['account'])


# Delete

def insert_and_delete_leads(names: Iterable[str]) -> List[Lead]:
    """Insert a Lead for every name by one request and delete them again."""
    leads = [Lead(last_name=name, company=SAMPLE_LEAD_COMPANY) for name in names]
    if not leads:
        return leads
    Lead.objects.bulk_create(leads)
    lead_ids = [lead.pk for lead in leads]
    log.info("Inserted %d Leads: %s", len(leads), lead_ids)
    Lead.objects.filter(pk__in=lead_ids).delete()
    log.info("Deleted %d Leads", len(lead_ids))
    return leads


def create_and_delete_cases(account_id: str, num_of_cases: int) -> int:
    """Insert Cases of the Account one by one, then delete that many of them.

    Returns the number of deleted Cases. A negative `num_of_cases` is rejected
    by ValueError before anything is saved.
    """
    if num_of_cases < 0:
        raise ValueError("num_of_cases must not be negative: %d" % num_of_cases)
    for i in range(num_of_cases):
        case = Case.objects.create(account_id=account_id, subject='Sample Case %d' % (i + 1))
        log.info("Inserted Case %s for Account %s", case.pk, account_id)
    case_ids = list(Case.objects.filter(account_id=account_id)
                    .order_by('pk').values_list('pk', flat=True)[:num_of_cases])
    if not case_ids:
        return 0
    deleted, _ = Case.objects.filter(pk__in=case_ids).delete()
    log.info("Deleted %d Cases of Account %s", deleted, account_id)
    return deleted
