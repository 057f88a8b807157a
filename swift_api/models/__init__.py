"""
SQLAlchemy Models Package

Import all models here to:
1. Make them available as: from swift_api.models import Book
2. Ensure Alembic discovers them for migrations
"""

from swift_api.models.book import Book

__all__ = [
    "Book",
]
