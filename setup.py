# coding: utf-8

import sys

from setuptools import find_packages, setup

from oledtext import VERSION

needs_pytest = {"pytest", "test", "ptr"}.intersection(sys.argv)
pytest_runner = ["pytest-runner"] if needs_pytest else []

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="oledtext",
    version=VERSION,
    description="UTF-8 to extended ASCII text preparation for single byte glyph displays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs.*"]),
    install_requires=["construct>=2.10"],
    python_requires=">=3.7",
    setup_requires=["wheel"] + pytest_runner,
    tests_require=[
        "pytest",
        "pytest-env",
        "pytest-mock",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    extras_require={
        "YAML": ["pyyaml>=5.2.0"],
        "test": ["pytest", "pytest-env", "pytest-mock", "pyyaml>=5.2.0"],
    },
    entry_points={
        "console_scripts": [
            "oledtext-convert = oledtext.console_scripts.oledtext_convert:main",
        ]
    },
)
