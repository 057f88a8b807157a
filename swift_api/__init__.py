"""
SwiftAPI Books Catalog

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine selection, sessions and schema setup
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Persistence gateway, validation policy, rate limiting
"""

__version__ = "0.1.0"
