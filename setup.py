#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Setup and distribution."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

import os
from os.path import abspath, dirname
from setuptools import find_packages, setup
import sys

PROJECT_ROOT = dirname(abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)
os.chdir(PROJECT_ROOT)

from fractal_noise import __author__, __contact__, __homepage__, get_version


def get_reqs(path):
    """Parse a pip requirements file.

    :param str path: The path to the requirements file
    :returns list: A list of package strings

    """
    reqs = []
    with open(path) as req_file:
        for line in req_file:
            # Remove any comments
            line = line.split("#", 1)[0].strip()
            if line and not line.startswith("-"):
                reqs.append(line)
    return reqs


setup(
    name="fractal-noise",
    version=get_version(),
    # PyPI metadata
    description="Seedable N-dimensional fractal lattice noise",
    long_description=open("README.rst").read(),
    author=__author__,
    author_email=__contact__,
    url=__homepage__,
    license="MIT",
    keywords=["noise", "perlin", "fractal", "procedural", "terrain"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    # Packaging
    packages=find_packages(exclude=["tests", "tests.*"]),
    zip_safe=False,
    # Requirements
    install_requires=get_reqs("requirements.txt"),
    extras_require={"test": get_reqs("dev-requirements.txt")},
)
