"""
Test Fixtures and Utilities

Shared synthetic expenses and helpers for subprocess-based tests.
"""
