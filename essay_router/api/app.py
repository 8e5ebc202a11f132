"""HTTP 应用入口。

所有路径都落到同一个 catch-all 路由，由 Router.dispatch 决定去向。
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.requests import Request

from essay_router.api.assets import AssetServer, StaticAssets
from essay_router.api.chat import ChatConfig, ChatHandler
from essay_router.api.router import Router
from essay_router.config.settings import settings
from essay_router.providers import create_provider
from essay_router.providers.base import InferenceClient


def create_app(
    chat_handler: Optional[ChatHandler] = None,
    assets: Optional[AssetServer] = None,
    provider: Optional[InferenceClient] = None,
) -> FastAPI:
    """组装应用；未传入的协作者按 settings 创建默认实现。"""

    if chat_handler is None:
        provider = provider or create_provider()
        chat_handler = ChatHandler(provider, ChatConfig.from_settings())
    router = Router(chat_handler, assets or StaticAssets(settings.assets_dir))

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        if provider is not None:
            await provider.aclose()

    app = FastAPI(
        title="Essay Review Router",
        description="Routes essay review chats to Workers AI and streams the reply back",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    async def dispatch(request: Request):
        return await router.dispatch(request)

    # methods=None：任意方法（含 TRACE 等扩展方法）都交给 Router 判断
    app.router.add_route("/{full_path:path}", dispatch, include_in_schema=False)

    return app


def main() -> None:
    import uvicorn

    uvicorn.run(
        "essay_router.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
