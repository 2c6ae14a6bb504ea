"""Initialize Neo4j schema (indexes) for the ticker store."""

import os

from neo4j import GraphDatabase
from dotenv import load_dotenv

load_dotenv()

NEO4J_URI = os.getenv("NEO4J_URI", "bolt://localhost:7687")
NEO4J_USER = os.getenv("NEO4J_USER", "neo4j")
NEO4J_PASSWORD = os.getenv("NEO4J_PASSWORD", "password")
NEO4J_DATABASE = os.getenv("NEO4J_DATABASE") or None

# Backs the symbol + lastUpdated range lookup
SCHEMA_STATEMENTS = [
    "CREATE INDEX ticker_symbol_last_updated IF NOT EXISTS "
    "FOR (t:Ticker) ON (t.symbol, t.lastUpdated)",
]


def apply_schema(driver, statements: list[str], database: str | None = None) -> int:
    """Run each schema statement, returning how many succeeded."""
    applied = 0
    with driver.session(database=database) as session:
        for stmt in statements:
            try:
                session.run(stmt).consume()
                applied += 1
                print(f"✓ {stmt[:60]}...")
            except Exception as e:
                print(f"✗ {stmt[:60]}... - {e}")
    return applied


def main():
    print(f"Connecting to Neo4j at {NEO4J_URI}...")

    driver = GraphDatabase.driver(NEO4J_URI, auth=(NEO4J_USER, NEO4J_PASSWORD))

    # Verify connectivity
    driver.verify_connectivity()
    print("✓ Connected to Neo4j\n")

    print("=== Creating Indexes ===")
    apply_schema(driver, SCHEMA_STATEMENTS, NEO4J_DATABASE)

    driver.close()
    print("\n✓ Schema initialization complete!")


if __name__ == "__main__":
    main()
