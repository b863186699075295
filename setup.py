#!/usr/bin/env python3
"""
Setup script for the geojson-validation package
"""

from setuptools import setup, find_packages

setup(
    name="geojson-validation",
    version="0.1.0",
    description="Structural validation of decoded GeoJSON objects with path-annotated errors",
    packages=find_packages(include=["geojson_validation", "geojson_validation.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    package_data={
        "geojson_validation": ["py.typed"],
    },
)
