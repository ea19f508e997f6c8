"""
Data Risk Scavenger Utilities

Constants, exceptions, helpers and validators.
"""
