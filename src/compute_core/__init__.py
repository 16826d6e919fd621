"""
Compute core - Main package namespace.

This package provides the compute_core namespace for importing package
components. Users can import as: ``from compute_core import domain``.
"""

__version__ = "0.1.0"

import application
import config
import domain
import infrastructure

__all__: list[str] = [
    "application",
    "config",
    "domain",
    "infrastructure",
]
