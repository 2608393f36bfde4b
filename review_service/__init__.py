"""
Review Service - anonymous media reviews with threaded replies
"""

__version__ = "1.0.0"
