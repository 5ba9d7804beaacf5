"""
FastBatch Setup Configuration

Minimal setup.py for backward compatibility.
All configuration is now in pyproject.toml following PEP 517/518.
"""

from setuptools import setup

# All configuration is now in pyproject.toml
# This setup.py is kept for backward compatibility only
setup()
