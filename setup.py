"""
Setup configuration for awesome-tree.

Read-only inspector for awesome's screens, tags and clients over D-Bus.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read long description from README if it exists
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="awesome-tree",
    version="0.1.0",
    description="Lazy, typed view of the awesome window manager object tree over awful.remote",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="NixOS Configuration Team",
    author_email="",
    packages=find_packages(include=["awesome_tree", "awesome_tree.*"]),
    install_requires=[
        "pydbus>=0.6.0",
        "pydantic>=2.0",
        "click>=8.0",
        "rich>=13.0",
    ],
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "awesome-tree=awesome_tree.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    extras_require={
        "gi": [
            "PyGObject>=3.42",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
