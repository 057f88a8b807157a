"""
Services Package

Logic that is independent of HTTP handling:
- books.py: BookGateway, the persistence layer for Book rows
- validation.py: configurable validation policy for book input
- rate_limiter.py: per-client read and write budgets for the books routes
"""
