"""
setup.py

Packaging metadata and CLI entry point for hostel-registration.

Version: 0.1.0 — Validation pipeline, notification hub and layered
registration, driven by a click command group.
"""
from setuptools import setup, find_packages

setup(
    name="hostel-registration",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "hostel-registration=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
