"""
Data Risk Scavenger API Package

FastAPI routers and dependencies.
"""
