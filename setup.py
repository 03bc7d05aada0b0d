#! /usr/bin/python
# -*- coding: utf-8 -*-

from setuptools import find_packages, setup


setup(
    name="node-address-resolver",
    version="1.0",
    packages=find_packages(include=["libs", "libs.*", "utilities", "utilities.*"]),
    include_package_data=True,
    install_requires=[
        "netaddr>=1.0",
        "pytest-testconfig",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    python_requires=">=3.10",
)
