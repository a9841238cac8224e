#!/usr/bin/env python
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import re
import typing as tp
from pathlib import Path
from setuptools import setup
from setuptools import find_packages


ROOT = Path(__file__).parent


def _requirements(name: str) -> tp.List[str]:
    """Non-empty lines of requirements/<name>.txt"""
    lines = (ROOT / "requirements" / f"{name}.txt").read_text().splitlines()
    return [line.strip() for line in lines if line.strip()]


def _version() -> str:
    """Version declared in the package __init__"""
    content = (ROOT / "diffevo" / "__init__.py").read_text()
    found = re.search(r'^__version__ = "(?P<version>[\w\.]+)"$', content, re.MULTILINE)
    if found is None:
        raise RuntimeError("No __version__ in diffevo/__init__.py")
    return found.group("version")


setup(
    name="diffevo",
    version=_version(),
    license="MIT",
    description="Self-adaptive differential evolution for gradient-free global optimization",
    long_description=(ROOT / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["diffevo", "diffevo.*"]),
    package_data={"diffevo": ["py.typed"]},
    python_requires=">=3.6",
    install_requires=_requirements("main"),
    extras_require={"dev": _requirements("dev")},
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
    ],
)
