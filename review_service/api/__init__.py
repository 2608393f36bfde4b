"""
API module initialization
"""

from . import reviews, reactions, health, home

__all__ = ["reviews", "reactions", "health", "home"]
