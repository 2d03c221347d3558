#!/usr/bin/env python
import os

from setuptools import setup, find_packages

with open('requirements.txt') as requirements:
    requires = [line.strip() for line in requirements if line.strip()]

version = os.environ.get('VERSION')

if version is None:
    with open(os.path.join('.', 'VERSION')) as version_file:
        version = version_file.read().strip()


setup_options = {
    'name': 'thorchain',
    'version': version,
    'description': 'Transaction model, signing and identity recovery for a fee-delegating PoA ledger',
    'author': 'ICON foundation',
    'packages': find_packages(exclude=["tests", "tests.*"]),
    'license': "Apache License 2.0",
    'install_requires': requires,
    'extras_require': {
        'tests': ['pytest>=4.6.3'],
    },
    'python_requires': '>=3.7',
    'classifiers': [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only'
    ]
}

setup(**setup_options)
