"""
Data Risk Scavenger Services Package

Source adapters, aggregation, scan coordination and reporting.
"""
