from typing import Any, Dict


class SearchBackend:
    # Connection
    def ping(self) -> None:
        """Raise EngineError when the engine is unreachable."""
        ...

    # Index lifecycle
    def index_exists(self, name: str) -> bool:
        ...

    def create_index(self, name: str) -> None:
        """Create an index with the engine's default settings (no mapping)."""
        ...

    def drop_index(self, name: str) -> None:
        ...

    # Indexing
    def index_document(self, name: str, source: Dict[str, Any]) -> None:
        ...

    # Searching
    def search(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Run a query body and return the engine's raw response (`hits.hits[]._source`)."""
        ...
