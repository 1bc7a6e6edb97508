"""
Test suite for polyrecon

Contains:
- tests/unit/          : Unit tests for math core, input contract, driver and CLI
"""
