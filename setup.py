#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="pwbits",
    version="1.0.0",
    description="Password generator with tracked bits of entropy",
    python_requires=">=3.8",
    packages=find_packages(include=["pwbits", "pwbits.*"]),
    install_requires=[
        "PyNaCl",
        "blessed",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["pwbits = pwbits.main:main"],
    },
)
