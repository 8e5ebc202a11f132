"""/api/chat 处理器。

流程：解析请求体 → 注入 system 提示词 → 调用推理后端 → 原样转发流式响应。
解析或调用失败时统一返回 500 + {"error": "Failed to process request"}，
失败细节只写日志，不返回给调用方。
"""

from dataclasses import dataclass
from typing import Mapping

import httpx
from starlette.requests import Request
from starlette.responses import JSONResponse, Response, StreamingResponse

from essay_router.config.settings import settings
from essay_router.domain.conversation import ensure_system_prompt
from essay_router.domain.exceptions import BusinessError
from essay_router.domain.models import InferenceRequest, parse_chat_payload
from essay_router.infrastructure.logging.logger import logger
from essay_router.prompts import load_system_prompt
from essay_router.providers.base import InferenceClient
from essay_router.providers.registry import get_model_config


ERROR_BODY = {"error": "Failed to process request"}

# 逐跳头部，不随响应转发
HOP_BY_HOP_HEADERS = frozenset({
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailer",
    "transfer-encoding",
    "upgrade",
})


@dataclass(frozen=True)
class ChatConfig:
    """ChatHandler 的固定参数，构造时注入。"""

    model_id: str
    system_prompt: str
    max_tokens: int = 1024

    @classmethod
    def from_settings(cls, cfg=settings) -> "ChatConfig":
        model_cfg = get_model_config(cfg.default_provider, cfg.default_model)
        return cls(
            model_id=model_cfg.provider_model,
            system_prompt=load_system_prompt("essay-review", cfg.prompt_locale),
            max_tokens=model_cfg.max_tokens,
        )


def relay_headers(headers: Mapping[str, str]) -> dict:
    return {k: v for k, v in headers.items() if k.lower() not in HOP_BY_HOP_HEADERS}


class UpstreamResponse(StreamingResponse):
    """原样转发上游的状态码、头部与原始字节流。

    无论正常结束、客户端断开还是被取消，上游响应都会被关闭。
    """

    def __init__(self, upstream: httpx.Response):
        super().__init__(
            upstream.aiter_raw(),
            status_code=upstream.status_code,
            headers=relay_headers(upstream.headers),
        )
        self._upstream = upstream

    async def __call__(self, scope, receive, send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            await self._upstream.aclose()


class ChatHandler:
    """把一次对话请求转发给推理后端。"""

    def __init__(self, inference: InferenceClient, config: ChatConfig):
        self._inference = inference
        self._config = config

    async def handle(self, request: Request) -> Response:
        try:
            payload = parse_chat_payload(await request.body())
            messages, injected = ensure_system_prompt(payload.messages, self._config.system_prompt)
            inference_req = InferenceRequest(
                model=self._config.model_id,
                messages=messages,
                max_tokens=self._config.max_tokens,
            )
            logger.info("Dispatching chat request", extra={"extra": {
                "model": inference_req.model,
                "message_count": len(messages),
                "system_prompt_injected": injected,
            }})
            upstream = await self._inference.run(
                inference_req.model,
                inference_req.inputs(),
                return_raw_response=inference_req.raw_stream,
            )
        except Exception as e:
            code = e.code if isinstance(e, BusinessError) else type(e).__name__
            logger.error(f"Error processing chat request: {e}", extra={"extra": {
                "code": code,
                "http_status": getattr(e, "http_status", None),
            }})
            return JSONResponse(ERROR_BODY, status_code=500)

        return UpstreamResponse(upstream)
