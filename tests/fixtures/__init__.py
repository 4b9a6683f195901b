"""
Test Fixtures and Utilities

Shared synthetic transactions, profiles and ledger builders.
"""
