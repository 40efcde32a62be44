import pytest

from search import services


@pytest.fixture(autouse=True)
def use_memory_backend(settings, monkeypatch):
    # OpenSearch 외부 의존 끊고 InMemory 백엔드로 테스트 + backend 싱글톤 초기화
    settings.OPENSEARCH = {**settings.OPENSEARCH, "ENABLED": False}
    settings.SEARCH_INDEX = "users"
    monkeypatch.setattr(services, "_backend", None)
    yield


@pytest.fixture
def engine():
    return services.backend()
