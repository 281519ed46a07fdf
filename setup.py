# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause

import os
import sys

from setuptools import find_packages, setup

if not sys.version_info[:2] >= (3, 9):
    sys.exit(
        f"shellenv is only meant for Python 3.9 and up. "
        f"current version: {sys.version_info.major}.{sys.version_info.minor}"
    )


# When executing setup.py, we need to be able to import ourselves, this
# means that we need to add the src directory to the sys.path.
src_dir = here = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, src_dir)
import shellenv  # noqa: E402

long_description = """
shellenv keeps the environment of an interactive shell session in sync with a
host executable. It prints activation, deactivation and variable assignment
scripts for bash, zsh, fish and xonsh, and installs a pre-prompt hook that calls
back into the executable before every prompt.
"""
install_requires = [
    "boltons >=23.0.0",
    "charset-normalizer",
    "frozendict >=2.4.2",
    "ruamel.yaml >=0.17",
]
extras_require = {
    "test": [
        "pytest >=7,<9.1",
        "pytest-mock",
    ],
}


setup(
    name=shellenv.__name__,
    version=shellenv.__version__,
    author=shellenv.__author__,
    author_email=shellenv.__email__,
    license=shellenv.__license__,
    description=shellenv.__summary__,
    long_description=long_description,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "build", ".tox")),
    entry_points={
        "console_scripts": [
            "shellenv=shellenv.cli.main:main",
        ],
    },
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.9",
    zip_safe=False,
)
