#!/usr/bin/env python
"""
Yeller
======

Yeller is a Python client for `Yeller <http://yellerapp.com/>`_. It reports
exceptions, along with the stack they were reported from and any custom
data you attach, to the Yeller collectors. Delivery moves on to the next
collector whenever one cannot be reached, and never raises into the
application that reports.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('yeller/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = [
    'requests>=2.0',
]

tests_require = [
    'flake8',
    'mock',
    'pytest',
    'responses',
]


setup(
    name='yeller',
    version=version,
    author='Yeller',
    author_email='support@yellerapp.com',
    url='https://github.com/yeller/yeller-python',
    description='Yeller is a client for Yeller (http://yellerapp.com)',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    extras_require={
        'tests': tests_require,
    },
    license='BSD',
    python_requires='>=3.8',
    install_requires=install_requires,
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'yeller = yeller.scripts.runner:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
