"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer is the only contract offered to the surrounding application. Every
function takes the database session as its first argument, following the
Repository pattern.
"""

from app.crud import company, computer, real_estate

__all__ = ["company", "computer", "real_estate"]
