import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from search import services
from search.exceptions import EngineError


class TestPopulateUsersCommand:
    def test_populates(self, engine):
        call_command("populate_users", "4")
        assert len(engine.indices["users"]) == 4

    def test_reset_drops_first(self, engine):
        call_command("populate_users", "3")
        call_command("populate_users", "2", "--reset")
        assert len(engine.indices["users"]) == 2

    @pytest.mark.parametrize("count", ["0", "101"])
    def test_bad_value(self, count):
        with pytest.raises(CommandError, match="bad value"):
            call_command("populate_users", count)

    def test_engine_error_becomes_command_error(self, engine, monkeypatch):
        def _fail(name):
            raise EngineError("cluster_block_exception")

        monkeypatch.setattr(engine, "index_exists", _fail)
        with pytest.raises(CommandError, match="cluster_block_exception"):
            call_command("populate_users", "1")


class TestServeCommand:
    def test_startup_failure_never_binds(self, engine, monkeypatch):
        def _fail():
            raise EngineError("Connection refused")

        def _run(*args, **kwargs):
            raise AssertionError("uvicorn must not start")

        monkeypatch.setattr(engine, "ping", _fail)
        monkeypatch.setattr("uvicorn.run", _run)
        with pytest.raises(CommandError, match="Connection refused"):
            call_command("serve")

    def test_binds_all_interfaces_on_port(self, settings, monkeypatch):
        captured = {}
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: captured.update(app=app, **kwargs))
        settings.PORT = 8123
        call_command("serve")
        assert captured["app"] == "minisearch.asgi:application"
        assert captured["host"] == "0.0.0.0"
        assert captured["port"] == 8123
        assert captured["timeout_keep_alive"] == 15
        assert services.backend() is not None
