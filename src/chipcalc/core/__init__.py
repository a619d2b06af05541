"""
Core domain models, numeric primitives, and data contracts.

This package contains the foundational building blocks that are independent
of the UI shell and of persistence.
"""
