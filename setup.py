#!/usr/bin/env python3
"""
numparser install script

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'numparser', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']
    DESCRIPTION = _METADATA['description']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='numparser',
    version=VERSION,
    author=AUTHOR,
    description=DESCRIPTION,
    license='GPLv3+',
    python_requires='>=3.9',

    # contents
    # only include numparser and its subpackages: exclude tests
    packages=find_packages(include=['numparser', 'numparser.*']),
    package_data={'numparser.data': ['*.json']},
    install_requires=[],
    extras_require=dict(
        test=['pytest', 'coverage'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)
