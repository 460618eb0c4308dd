"""
Database access for PostgreSQL.
Defines the SQL executor contract used by the repositories and an
implementation backed by an async SQLAlchemy engine with connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence
from lightbnb.config import Settings, get_settings
import logging

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Rows returned by a single statement, as plain dictionaries."""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    
    @property
    def row_count(self) -> int:
        return len(self.rows)


class SQLExecutor(Protocol):
    """
    Anything that can run one parameterized statement.
    Placeholders are positional ($1, $2, ...) and must match len(params).
    """
    
    async def execute(self, statement: str, params: Sequence[Any] = ()) -> QueryResult:
        ...


class EngineExecutor:
    """
    SQL executor running statements on an async SQLAlchemy engine.
    Each call checks a connection out of the pool, runs the statement in its
    own transaction and returns the rows.
    """
    
    def __init__(self, engine: AsyncEngine):
        self.engine = engine
    
    async def execute(self, statement: str, params: Sequence[Any] = ()) -> QueryResult:
        """
        Execute a statement with positional parameters.
        
        Args:
            statement: SQL text using $n placeholders
            params: Values bound to the placeholders in order
            
        Returns:
            QueryResult holding every returned row
        """
        logger.debug(f"Executing statement with {len(params)} parameters")
        async with self.engine.begin() as conn:
            result = await conn.exec_driver_sql(statement, tuple(params))
            if not result.returns_rows:
                return QueryResult()
            rows = [dict(row) for row in result.mappings().all()]
        logger.debug(f"Statement returned {len(rows)} rows")
        return QueryResult(rows=rows)
    
    async def dispose(self) -> None:
        await self.engine.dispose()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create an async engine configured from application settings."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        pool_recycle=settings.db_pool_recycle,
        pool_timeout=settings.db_pool_timeout,
        connect_args={
            "server_settings": {
                "application_name": "lightbnb",
            }
        }
    )


_default_executor: Optional[EngineExecutor] = None


def get_executor() -> EngineExecutor:
    """
    Get the shared executor for the configured database.
    The engine is created on first use.
    """
    global _default_executor
    if _default_executor is None:
        settings = get_settings()
        _default_executor = EngineExecutor(create_engine_from_settings(settings))
        logger.info(f"Database engine created for environment: {settings.environment}")
    return _default_executor


async def check_database_connection(executor: SQLExecutor) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        result = await executor.execute("SELECT 1 AS ok")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
    
    if result.row_count != 1:
        logger.error(f"Database connection check returned {result.row_count} rows")
        return False
    
    logger.info("Database connection successful")
    return True


async def close_db_connection() -> None:
    """
    Close the shared executor's connection pool.
    The next get_executor() call starts a fresh pool.
    """
    global _default_executor
    if _default_executor is not None:
        await _default_executor.dispose()
        _default_executor = None
        logger.info("Database connections closed")
