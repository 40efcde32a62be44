import logging
import threading
from typing import List, Optional

from django.conf import settings

from .documents import Document
from .exceptions import EngineError, StartupError
from .generators import fake_document
from .queries import build_user_query

log = logging.getLogger(__name__)

_backend = None
_backend_lock = threading.Lock()


def users_index() -> str:
    return getattr(settings, "SEARCH_INDEX", "users")


def get_backend():
    # env 기반 토글: ENABLED=false면 In-Memory (OpenSearch 생성 실패 시 대체하지 않는다)
    if not settings.OPENSEARCH.get("ENABLED", False):
        from .backends.memory_backend import InMemoryBackend

        return InMemoryBackend()
    from .backends.opensearch_backend import OpenSearchBackend

    return OpenSearchBackend()


def backend():
    global _backend
    if _backend is None:
        with _backend_lock:
            if _backend is None:
                _backend = get_backend()
    return _backend


def connect():
    try:
        b = backend()
        b.ping()
    except EngineError as e:
        raise StartupError(f"Failed to connect to search engine: {e}") from e
    log.info("Search engine connected!")
    return b


# Index Manager
def ensure_index(name: str) -> None:
    b = backend()
    if b.index_exists(name):
        return
    b.create_index(name)


# Populator
def populate(count: int) -> None:
    """Write `count` synthetic users one by one; the first failure aborts the rest (no rollback)."""
    name = users_index()
    ensure_index(name)
    b = backend()
    for _ in range(count):
        b.index_document(name, fake_document().to_source())
    log.info("Populated %d users into %s", count, name)


# Searcher
def search_users(term: Optional[str], offset: int = 0, size: int = 20) -> List[Document]:
    resp = backend().search(users_index(), build_user_query(term, offset, size))
    return [Document.from_source(hit.get("_source")) for hit in resp["hits"]["hits"]]
