#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books for development.

USAGE:
    # From the project root, pointing at a durable database
    DATABASE_URL=sqlite:///./books.db python scripts/seed_data.py

Without DATABASE_URL the books land in an in-memory database that
disappears when the script exits, so the script refuses to run.
"""

import sys
from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.orm import Session

from swift_api.config import get_settings
from swift_api.database import SessionLocal, init_db
from swift_api.models import Book
from swift_api.schemas import BookInput
from swift_api.services.books import BookGateway

SAMPLE_BOOKS = [
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "date_published": datetime(1965, 8, 1),
        "cover_image": "https://covers.openlibrary.org/b/id/11481354-L.jpg",
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "date_published": datetime(1949, 6, 8),
        "cover_image": "https://covers.openlibrary.org/b/id/7222246-L.jpg",
    },
    {
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "date_published": datetime(1813, 1, 28),
        "cover_image": "https://covers.openlibrary.org/b/id/14348537-L.jpg",
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "date_published": datetime(1937, 9, 21),
        "cover_image": "https://covers.openlibrary.org/b/id/6979861-L.jpg",
    },
    {
        "title": "Foundation",
        "author": "Isaac Asimov",
        "date_published": datetime(1951, 6, 1),
        "cover_image": "https://covers.openlibrary.org/b/id/6501931-L.jpg",
    },
    {
        "title": "Murder on the Orient Express",
        "author": "Agatha Christie",
        "date_published": datetime(1934, 1, 1),
        "cover_image": "https://covers.openlibrary.org/b/id/8228691-L.jpg",
    },
]


def clear_data(db: Session) -> None:
    """Remove all existing books."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(gateway: BookGateway) -> list[Book]:
    """Create the sample books."""
    print("Creating books...")
    books = [gateway.create(BookInput(**data)) for data in SAMPLE_BOOKS]
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()
    if settings.uses_memory_database:
        print("DATABASE_URL is not set; seeding an in-memory database has no effect.")
        sys.exit(1)

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    init_db()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        gateway = BookGateway(db)
        create_books(gateway)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"  - Books: {gateway.count()}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}/books")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
