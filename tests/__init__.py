# bitsha Test Suite
"""
Test suite including:
- Unit tests (bit order, padding, compression, driver, encoding)
- Integration tests (reference cross-check, audit log, CLI)
- Security tests (invalid inputs, contract violations, avalanche)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
