"""
Core matrix engine, request models, and contracts.

This module contains the foundational building blocks that are independent
of the UI layer (form input, HTML rendering, charts).
"""
