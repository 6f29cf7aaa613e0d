"""
Store API: CRUD HTTP service over a sales database.
"""

__version__ = "0.1.0"
