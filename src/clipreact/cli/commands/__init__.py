"""
CLI command implementations.

Each command lives in its own module and is registered in cli/main.py.
"""
