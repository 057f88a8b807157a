"""
Test Suite for the Books API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: /books endpoints
- test_gateway.py: BookGateway against the database
- test_validation.py: input schema and validation policy
- test_database.py: storage selection, schema setup, migrations
- test_config.py: settings parsing and validation
- test_app.py: application wiring (docs, health, error handling)

Running Tests:
    pytest
    pytest --cov=swift_api --cov-report=html
    pytest tests/test_books.py -v
"""
