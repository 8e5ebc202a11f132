"""前端静态资源。

Router 只把请求交给 AssetServer.fetch 并原样返回结果，不关心其内部实现。
"""

from typing import Protocol

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.staticfiles import StaticFiles


class AssetServer(Protocol):
    async def fetch(self, request: Request) -> Response:
        ...


class StaticAssets:
    """基于 Starlette StaticFiles 的静态文件服务，目录下的 index.html 作为首页。"""

    def __init__(self, directory: str):
        self._files = StaticFiles(directory=directory, html=True, check_dir=False)

    async def fetch(self, request: Request) -> Response:
        path = self._files.get_path(request.scope)
        try:
            return await self._files.get_response(path, request.scope)
        except HTTPException as e:
            return PlainTextResponse(e.detail, status_code=e.status_code, headers=e.headers)
