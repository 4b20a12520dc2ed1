import setuptools

setuptools.setup(
    name='django-salesforce-dml-examples',
    version='1.0',
    description='Examples of insert, update, upsert and delete on Salesforce standard objects by Django ORM',
    packages=setuptools.find_packages(include=['dml_examples', 'dml_examples.*']),
    python_requires='>=3.8',
    install_requires=[
        'django>=4.2,<5.2',
        'django-salesforce>=5.1',
        'pytz>=2012c',
        'requests>=2.32.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-django',
        ],
    },
    classifiers=[
        'Framework :: Django',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
    ],
)
