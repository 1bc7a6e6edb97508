"""
Core domain models, mathematical primitives, and input contracts.

This module contains the foundational building blocks that are independent
of the command-line boundary (stdin, stdout, exit codes).
"""
