"""
Only the root tests directory carries an __init__.py; the subdirectories are namespace packages (PEP 420).
Keeping this file lets pytest import test modules with the same package names in every environment.
"""
