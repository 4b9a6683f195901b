"""
Command Line Interface Package

Unified CLI for the finance reports engine.

Command Structure:
- finance-reports: Main entry point with utility commands (version, config)
- finance-reports report: spending, income-expense, savings-growth, budget,
  summary and all, each over a --start/--end date range
- finance-reports ledger: set-profile, add, delete and show for the stored data
"""
