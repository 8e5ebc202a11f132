"""请求路由。

- "/" 或不以 "/api/" 开头的路径 → 静态资源
- "/api/chat"：POST → ChatHandler，其余方法 → 405
- 其他 "/api/*" → 404
"""

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from essay_router.api.assets import AssetServer
from essay_router.api.chat import ChatHandler


API_PREFIX = "/api/"
CHAT_PATH = "/api/chat"


class Router:
    def __init__(self, chat_handler: ChatHandler, assets: AssetServer):
        self._chat = chat_handler
        self._assets = assets

    async def dispatch(self, request: Request) -> Response:
        path = request.url.path

        if path == "/" or not path.startswith(API_PREFIX):
            return await self._assets.fetch(request)

        if path == CHAT_PATH:
            if request.method == "POST":
                return await self._chat.handle(request)
            return PlainTextResponse("Method not allowed", status_code=405)

        return PlainTextResponse("Not found", status_code=404)
