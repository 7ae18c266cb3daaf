#! /usr/bin/env python3

import os
from setuptools import setup

def read_file(file_name):
    path = os.path.join(os.path.dirname(__file__), file_name)
    with open(path) as f:
        lines = f.readlines()
    return '\n'.join(lines)

VERSION = read_file('gpindel/version.py').split("'")[1]

setup(
    name='gpindel',
    version=VERSION,
    description='General-ploidy genotype likelihoods of indel alleles in pooled and single samples',
    long_description=read_file('README.rst'),
    packages=[
        'gpindel',
    ],
    install_requires=[
        'numpy',
        'numba',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>3.7.0',
    keywords=['biology', 'bioinformatics', 'genetics', 'genomics'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ]
    )
