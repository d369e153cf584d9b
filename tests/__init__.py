"""
Test Suite for the Expense Tracker

Test Structure:
- fixtures/: Shared test data and utilities
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI workflows through click's CliRunner
- e2e/: The installed ``expenses`` script under a pseudo-terminal

Test Data:
All expenses are synthetic.
"""
