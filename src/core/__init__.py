"""
Core domain types, numerical primitives, and the error hierarchy.

This module contains the foundational building blocks shared by every
formatter; nothing here depends on the clock or on any formatter.
"""
