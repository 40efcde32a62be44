import asyncio
import logging

log = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    # HTTP 요청 전체(본문 읽기 ~ 응답 쓰기)를 timeout초로 제한한다. 초과 시 연결을 끊고, 엔진 호출 자체는 취소되지 않는다.

    def __init__(self, app, timeout: float):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or not self.timeout:
            return await self.app(scope, receive, send)
        try:
            await asyncio.wait_for(self.app(scope, receive, send), timeout=self.timeout)
        except asyncio.TimeoutError:
            log.error("ERROR: [Request] %s %s timed out after %ss", scope.get("method"), scope.get("path"), self.timeout)
            raise
