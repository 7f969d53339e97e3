"""
Database models
"""
from hrportal.models.candidate import Candidate
from hrportal.models.demand import Demand
from hrportal.models.user import User

__all__ = [
    "Candidate",
    "Demand",
    "User",
]
