from django.apps import AppConfig


class DmlExamplesConfig(AppConfig):
    name = 'dml_examples'
    verbose_name = 'Salesforce DML examples'
