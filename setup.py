#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = [
    'attrs>=19.2.0',
    'inflection>=0.3.1',
    'jsonpointer>=2.1',
    'trafaret>=2.0.0',
]

test_requirements = [
    'pytest>=5.0',
]

setup(
    name='record_pointers',
    version='0.1.0',
    description='JSON Pointer (RFC 6901) for schema-described records',
    long_description=readme + '\n\n' + history,
    author='Vladimir Bolshakov',
    author_email='vovanbo@gmail.com',
    url='https://github.com/vovanbo/record_pointers',
    packages=[
        'record_pointers',
        'record_pointers.abc',
        'record_pointers.fields',
    ],
    package_dir={'record_pointers': 'record_pointers'},
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'tests': test_requirements,
    },
    python_requires='>=3.7',
    license='MIT license',
    zip_safe=False,
    keywords='record_pointers json-pointer rfc6901',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Topic :: Software Development :: Libraries',
    ],
    test_suite='tests',
)
