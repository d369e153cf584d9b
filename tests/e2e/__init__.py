#!/usr/bin/env python3
"""
End-to-end tests for the expenses package.

These tests execute the installed ``expenses`` script via subprocess and
pexpect to validate complete workflows from the user's perspective, including
the raw single-keystroke prompt of ``expenses clear``.
"""
