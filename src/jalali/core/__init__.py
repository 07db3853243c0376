"""
Core calendar arithmetic, domain models, and error taxonomy.

This module contains the foundational building blocks that are independent
of any host toolkit (UI widgets, dependency injection, etc.).
"""
