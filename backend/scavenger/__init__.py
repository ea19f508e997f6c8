"""
Data Risk Scavenger

Digital exposure scanning backend.
"""

__version__ = "1.0.0"
