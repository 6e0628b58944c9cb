import asyncio
import logging

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    """
    Одно окно ожидания на HTTP-запрос. Если ответ не начал отправляться
    за `timeout` секунд, клиент получает 504, а сервер продолжает работу.
    """

    def __init__(self, app: ASGIApp, timeout: float):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=self.timeout)
        except asyncio.TimeoutError:
            if response_started:
                raise
            logger.warning("Request timed out: %s %s", scope["method"], scope["path"])
            response = JSONResponse(status_code=504, content={"error": "request timed out"})
            await response(scope, receive, send)
