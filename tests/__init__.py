"""
Test Suite for secrets-to-env.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end runs through run_action and the CLI
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/secrets_to_env         # With coverage
"""
