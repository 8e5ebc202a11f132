"""Cloudflare Workers AI Provider 适配器。

本模块负责：

1. 接收模型 ID 与 inputs（messages/max_tokens）。
2. 拼出 Workers AI REST 端点，或在配置了 AI Gateway 时改走网关端点。
3. 以流式方式发送请求并处理网络/API 异常。
4. 把仍未读取的 httpx.Response 原样交还调用方。

端点：
- 直连: {ai_base_url}/accounts/{account_id}/ai/run/{model}
- 网关: {ai_gateway_base_url}/{account_id}/{gateway_id}/workers-ai/{model}
- 认证: Authorization: Bearer <api_token>
"""

from typing import Any, Dict, Optional

import httpx

from essay_router.config.settings import settings
from essay_router.domain.exceptions import ApiError, NetworkError, RateLimitError, ValidationError
from essay_router.providers.registry import WORKERS_AI_CONFIG


class WorkersAIClient:
    """Workers AI 客户端实现。

    - name: Provider 名称（供日志/调试使用）。
    - run: 对外统一调用入口。
    """

    name = "workers-ai"

    def __init__(self, cfg=settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        # Settings 里包含账号、token、网关、超时等配置
        self._settings = cfg
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def run(
        self,
        model: str,
        inputs: Dict[str, Any],
        *,
        return_raw_response: bool = True,
    ) -> Any:
        """调用模型。

        return_raw_response=True 时返回尚未读取 body 的流式 httpx.Response，
        由调用方转发并关闭；否则读取完整 JSON 并返回其中的 result 字段。
        """

        if not getattr(self._settings, "cf_account_id", None):
            raise ValidationError(code="MISSING_ACCOUNT_ID", message="CF_ACCOUNT_ID not set")
        if not getattr(self._settings, "cf_api_token", None):
            raise ValidationError(code="MISSING_API_TOKEN", message="CF_API_TOKEN not set")

        payload = dict(inputs)
        payload["stream"] = return_raw_response
        client = self._get_client()
        request = client.build_request(
            "POST",
            self.endpoint(model),
            json=payload,
            headers=self._headers(),
        )
        try:
            resp = await client.send(request, stream=True)
            if resp.status_code >= 400:
                body = await resp.aread()
                await resp.aclose()
                if resp.status_code == 429:
                    raise RateLimitError(code="RATE_LIMIT", message="Workers AI rate limit", http_status=429)
                raise ApiError(
                    code="API_ERROR",
                    message=body.decode("utf-8", errors="replace"),
                    http_status=resp.status_code,
                    model=model,
                )
            if return_raw_response:
                return resp
            try:
                await resp.aread()
            finally:
                await resp.aclose()
        except httpx.RequestError as e:
            # 网络错误：DNS 失败、连接超时等
            raise NetworkError(code="NETWORK_ERROR", message=str(e), model=model)

        try:
            data = resp.json()
        except ValueError as e:
            raise ApiError(
                code="INVALID_RESPONSE",
                message=f"Workers AI returned a non-JSON body: {e}",
                http_status=resp.status_code,
                model=model,
            )
        if isinstance(data, dict) and "result" in data:
            return data["result"]
        return data

    def endpoint(self, model: str) -> str:
        account = self._settings.cf_account_id
        gateway = getattr(self._settings, "ai_gateway_id", None)
        if gateway:
            base = self._settings.ai_gateway_base_url.rstrip("/")
            return f"{base}/{account}/{gateway}/workers-ai/{model}"
        base = (getattr(self._settings, "ai_base_url", None) or WORKERS_AI_CONFIG.base_url).rstrip("/")
        return f"{base}/accounts/{account}/ai/run/{model}"

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ---- 辅助方法 ----

    def _get_client(self) -> httpx.AsyncClient:
        # 连接池在多个请求间复用，应用关闭时由 aclose 释放
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._settings.http_timeout,
                trust_env=False,
                transport=self._transport,
            )
        return self._client

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._settings.cf_api_token}",
            "Content-Type": "application/json",
        }
        if getattr(self._settings, "ai_gateway_id", None):
            headers["cf-aig-skip-cache"] = "true" if self._settings.ai_gateway_skip_cache else "false"
            headers["cf-aig-cache-ttl"] = str(self._settings.ai_gateway_cache_ttl)
        return headers
