"""
Test Suite for Finance Reports

Test Structure:
- fixtures/: Shared test data and utilities
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

Test Data:
All test data uses synthetic financial information.
"""
