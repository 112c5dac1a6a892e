"""
Core domain models, money primitives, and data contracts.

This module contains the foundational building blocks that are independent
of external systems (HTTP layer, database, holiday and exchange-rate APIs).
"""
