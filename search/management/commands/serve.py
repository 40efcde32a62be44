import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from search import services
from search.exceptions import StartupError

log = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Connect to the search engine and serve the HTTP API on 0.0.0.0:<PORT>"

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=None, help="Listening port (default: PORT env)")
        parser.add_argument("--workers", type=int, default=None, help="uvicorn worker processes")

    def handle(self, *args, **opts):
        try:
            services.connect()
        except StartupError as e:
            # 부분 기동/재시도 없음
            log.critical("%s", e)
            raise CommandError(str(e)) from e

        import uvicorn

        port = opts["port"] or settings.PORT
        addr = f"0.0.0.0:{port}"
        self.stdout.write(self.style.SUCCESS(f"Server run on http://{addr}"))
        uvicorn.run(
            "minisearch.asgi:application",
            host="0.0.0.0",
            port=port,
            workers=opts["workers"],
            # 유휴 keep-alive 연결도 같은 시간으로 닫는다 (요청 자체의 상한은 asgi.RequestTimeoutMiddleware)
            timeout_keep_alive=settings.HTTP_TIMEOUT,
        )
