#!/usr/bin/env python3
"""
Setup script for the sitelang package
"""

from setuptools import setup, find_packages

setup(
    name="sitelang",
    version="0.1.0",
    description="Site locale resolution, locale dictionaries and language redirects",
    packages=find_packages(include=["sitelang", "sitelang.*"]),
    python_requires=">=3.9",
    install_requires=[
        # Web Framework
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",

        # Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.2",
        ],
    },
    package_data={
        "sitelang": ["py.typed"],
        "sitelang.locales": ["*.json"],
    },
)
