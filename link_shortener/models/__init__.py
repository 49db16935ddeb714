"""
Database models for the link shortener.
"""

from .link import Link

__all__ = ["Link"]
