"""
Data Risk Scavenger Data Models Package

Pydantic models for data validation and serialization.
"""

from .sources import *
from .scan import *
from .report import *
