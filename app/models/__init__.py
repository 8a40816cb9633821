"""
Database models package.
"""

from app.models.company import CompanyTable
from app.models.computer import ComputerTable
from app.models.real_estate import RealEstateTable

__all__ = ["CompanyTable", "ComputerTable", "RealEstateTable"]
