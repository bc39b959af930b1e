"""
Database package - Infrastructure Layer

This package contains the MongoDB connection used to read the order ledger.
"""

from src.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
