"""
User Directory

Embedded HTTP service exposing a read-only user directory as JSON.
"""

__version__ = "0.1.0"
