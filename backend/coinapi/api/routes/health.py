"""Health check endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from coinapi.api.dependencies import get_db_client
from coinapi.db.neo4j_client import Neo4jClient

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/db")
async def database_health(client: Neo4jClient = Depends(get_db_client)) -> dict[str, str]:
    """Check Neo4j database connectivity."""
    try:
        await client.verify_connectivity()
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Database unhealthy: {str(e)}")
