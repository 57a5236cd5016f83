#!/usr/bin/env python3
import os
from setuptools import setup, find_packages

setup(
    name='coredns-component',
    version=os.environ.get('COMPONENT_VERSION', '0.1.0'),
    packages=find_packages(include=['coredns_component', 'coredns_component.*']),
    python_requires='>=3.8',
    install_requires=[
        'click',
        'requests',
    ],
    extras_require={
        'test': [
            'pytest',
            'PyHamcrest',
        ],
    },
    entry_points={
        'console_scripts': [
            'co-coredns = coredns_component.main:main',
        ],
    },
)
