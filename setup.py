#!/usr/bin/env python
"""
Build the soilpools package

that's all folks.
"""
__author__ = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__ = "mdekauwe@gmail.com"

import os
import re
from setuptools import setup

VERSION_PY = os.path.join("src", "soilpools", "_version.py")

def get_version():
    try:
        f = open(VERSION_PY)
    except EnvironmentError:
        return None
    with f:
        for line in f.readlines():
            mo = re.match("__version__ = '([^']+)'", line)
            if mo:
                return mo.group(1)
    return None

setup(name="pysoilpools",
    version=get_version(),
    description="One-pool and multi-pool linear decay soil carbon models",
    long_description="Compares a one-pool soil carbon decomposition model "
                     "with a five (or n) pool model through an aggregate "
                     "turnover time that preserves total steady-state carbon",
    author="Martin De Kauwe",
    author_email='mdekauwe@gmail.com',
    platforms = ['any'],
    python_requires=">=3.8",
    package_dir = {'': 'src'},
    packages = ['soilpools'],
    install_requires=[
        "numpy",
        "scipy>=1.4",
        "pandas",
        "configobj>=5.0.9",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
