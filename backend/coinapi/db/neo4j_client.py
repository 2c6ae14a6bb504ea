"""Neo4j database client for the ticker store."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from neo4j import AsyncGraphDatabase, AsyncDriver, AsyncSession
from neo4j.exceptions import ServiceUnavailable, AuthError

from coinapi.config import Settings
from coinapi.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


class Neo4jClient:
    """Async Neo4j database client.

    One instance is owned by the application lifespan: ``connect()`` on
    startup, ``disconnect()`` on shutdown. It can also be used as an async
    context manager for scoped use in scripts and tests.
    """

    def __init__(
        self,
        uri: str,
        user: str,
        password: str,
        database: Optional[str] = None,
    ) -> None:
        self._uri = uri
        self._auth = (user, password)
        self._database = database
        self._driver: AsyncDriver | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Neo4jClient":
        """Build a client from application settings."""
        return cls(
            settings.NEO4J_URI,
            settings.NEO4J_USER,
            settings.NEO4J_PASSWORD,
            database=settings.NEO4J_DATABASE,
        )

    @property
    def connected(self) -> bool:
        return self._driver is not None

    async def connect(self) -> None:
        """Initialize the Neo4j driver connection."""
        if self._driver is not None:
            return

        driver = AsyncGraphDatabase.driver(
            self._uri,
            auth=self._auth,
            max_connection_lifetime=3600,
            max_connection_pool_size=50,
            connection_acquisition_timeout=60,
        )

        # Verify connectivity
        try:
            await driver.verify_connectivity()
        except ServiceUnavailable as e:
            await driver.close()
            raise StoreUnavailable(f"Failed to connect to Neo4j: {e}") from e
        except AuthError as e:
            await driver.close()
            raise StoreUnavailable(f"Neo4j authentication failed: {e}") from e
        except Exception:
            await driver.close()
            raise

        self._driver = driver
        logger.info(f"Connected to Neo4j at {self._uri}")

    async def disconnect(self) -> None:
        """Close the Neo4j driver connection."""
        if self._driver is not None:
            await self._driver.close()
            self._driver = None
            logger.info("Neo4j connection closed")

    async def __aenter__(self) -> "Neo4jClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()

    def get_driver(self) -> AsyncDriver:
        """Get the Neo4j driver instance."""
        if self._driver is None:
            raise RuntimeError("Neo4j client not initialized. Call connect() first.")
        return self._driver

    async def verify_connectivity(self) -> None:
        await self.get_driver().verify_connectivity()

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a Neo4j session as an async context manager."""
        driver = self.get_driver()
        session = driver.session(database=self._database)
        try:
            yield session
        finally:
            await session.close()

    async def execute_query(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Execute a Cypher query and return results as a list of dicts."""
        async with self.get_session() as session:
            result = await session.run(query, parameters or {})
            records = await result.data()
            return records
