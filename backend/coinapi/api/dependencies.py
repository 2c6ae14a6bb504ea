"""FastAPI dependencies resolving the objects wired by the app factory."""

from fastapi import Request

from coinapi.db.neo4j_client import Neo4jClient
from coinapi.services.ticker_service import TickerService


def get_db_client(request: Request) -> Neo4jClient:
    return request.app.state.db_client


def get_ticker_service(request: Request) -> TickerService:
    return request.app.state.ticker_service
