"""Database module for Neo4j connectivity."""

from coinapi.db.neo4j_client import Neo4jClient

__all__ = ["Neo4jClient"]
