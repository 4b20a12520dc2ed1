# django-salesforce
#
# by Hyneck Cernoch and Phil Christensen
# See LICENSE.md for details
#

"""
Salesforce standard objects used by the DML examples.

Only the fields that the examples read or write are declared. The API names
are derived by django-salesforce from the attribute names
(e.g. `last_name` -> `LastName`, `account` -> `AccountId`).
"""

from salesforce import models
from salesforce.models import SalesforceModel as SalesforceModelParent

INDUSTRIES = [
    'Agriculture', 'Apparel', 'Banking', 'Biotechnology', 'Chemicals',
    'Communications', 'Construction', 'Consulting', 'Education',
    'Electronics', 'Energy', 'Engineering', 'Entertainment', 'Environmental',
    'Finance', 'Food & Beverage', 'Government', 'Healthcare', 'Hospitality',
    'Insurance', 'Machinery', 'Manufacturing', 'Media', 'Not For Profit',
    'Other', 'Recreation', 'Retail', 'Shipping', 'Technology',
    'Telecommunications', 'Transportation', 'Utilities'
]

STAGES = [
    'Prospecting', 'Qualification', 'Needs Analysis', 'Value Proposition',
    'Id. Decision Makers', 'Perception Analysis', 'Proposal/Price Quote',
    'Negotiation/Review', 'Closed Won', 'Closed Lost',
]


# This class customizes `managed = True` for tests and does not disturb SF
class SalesforceModel(SalesforceModelParent):
    class Meta:
        abstract = True
        managed = True


class Account(SalesforceModel):
    name = models.CharField(max_length=255)
    industry = models.CharField(max_length=100, choices=[(x, x) for x in INDUSTRIES],
                                blank=True, null=True)
    description = models.TextField(blank=True, null=True)

    def __str__(self):
        return self.name


class Contact(SalesforceModel):
    account = models.ForeignKey(Account, on_delete=models.DO_NOTHING,
                                blank=True, null=True)  # db_column: 'AccountId'
    last_name = models.CharField(max_length=80)
    first_name = models.CharField(max_length=40, blank=True, null=True)

    def __str__(self):
        return ' '.join(x for x in (self.first_name, self.last_name) if x)


class Opportunity(SalesforceModel):
    name = models.CharField(max_length=120)
    account = models.ForeignKey(Account, on_delete=models.DO_NOTHING,
                                blank=True, null=True)
    stage = models.CharField(max_length=255, db_column='StageName',
                             choices=[(x, x) for x in STAGES])  # e.g. "Prospecting"
    close_date = models.DateField()
    amount = models.DecimalField(max_digits=18, decimal_places=2, blank=True, null=True)

    class Meta(SalesforceModel.Meta):
        verbose_name_plural = 'Opportunities'

    def __str__(self):
        return self.name


class Lead(SalesforceModel):
    last_name = models.CharField(max_length=80)
    company = models.CharField(max_length=255)

    def __str__(self):
        return self.last_name


class Case(SalesforceModel):
    account = models.ForeignKey(Account, on_delete=models.DO_NOTHING,
                                blank=True, null=True)
    subject = models.CharField(max_length=255, blank=True, null=True)

    def __str__(self):
        return self.subject or str(self.pk)
