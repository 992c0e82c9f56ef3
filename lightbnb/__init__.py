"""
LightBnB data-access layer: users, properties and reservations on PostgreSQL.
"""

__version__ = "1.0.0"
