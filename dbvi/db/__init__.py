"""Database layer: adapters, provider registry and the query client."""

from .adapters import DatabaseAdapter
from .client import QueryClient, open_client
from .exceptions import MissingDriverError, QueryError
from .providers import get_adapter, get_supported_db_types
from .results import QueryResult, format_result

__all__ = [
    "DatabaseAdapter",
    "MissingDriverError",
    "QueryClient",
    "QueryError",
    "QueryResult",
    "format_result",
    "get_adapter",
    "get_supported_db_types",
    "open_client",
]
