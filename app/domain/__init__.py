"""Domain-level policies and business rules.

Language registry and the bookkeeping of quality profile resolution live here,
independent from *where* they are applied (services, repositories, etc.).
"""
