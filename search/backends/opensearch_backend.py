import logging
from typing import Any, Dict

from django.conf import settings

from ..exceptions import EngineError
from .base import SearchBackend

log = logging.getLogger(__name__)


class OpenSearchBackend(SearchBackend):
    def __init__(self, client=None):
        from opensearchpy import OpenSearch, exceptions  # import 지연

        self._errors = exceptions
        if client is None:
            conf = settings.OPENSEARCH
            auth = (conf["USER"], conf["PASSWORD"]) if conf["USER"] else None
            # 재시도 없음: 엔진 에러는 요청 단위로 즉시 실패
            client = OpenSearch(hosts=conf["HOSTS"], http_auth=auth, timeout=conf["TIMEOUT"], max_retries=0, retry_on_timeout=False)
        self.client = client

    def _call(self, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except self._errors.OpenSearchException as e:
            raise EngineError(str(e)) from e

    def ping(self) -> None:
        # info()는 연결 실패 시 ConnectionError를 던진다 (ping()은 False만 돌려줌)
        info = self._call(self.client.info)
        log.debug("Engine info: %s", info)

    # Index lifecycle
    def index_exists(self, name: str) -> bool:
        return bool(self._call(self.client.indices.exists, index=name))

    def create_index(self, name: str) -> None:
        try:
            self.client.indices.create(index=name)
        except self._errors.RequestError as e:
            # 동시 요청이 먼저 만든 경우는 성공으로 본다
            if e.error == "resource_already_exists_exception":
                return
            raise EngineError(str(e)) from e
        except self._errors.OpenSearchException as e:
            raise EngineError(str(e)) from e
        log.info("Index created: %s", name)

    def drop_index(self, name: str) -> None:
        if self.index_exists(name):
            self._call(self.client.indices.delete, index=name)

    # Indexing
    def index_document(self, name: str, source: Dict[str, Any]) -> None:
        self._call(self.client.index, index=name, body=source, refresh="wait_for")

    # Searching
    def search(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._call(self.client.search, index=name, body=body)
