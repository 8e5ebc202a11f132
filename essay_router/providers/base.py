"""推理 Provider 抽象接口。

ChatHandler 不直接依赖具体厂商的 HTTP API，而是依赖此协议：

- run(model, inputs, return_raw_response=True) 返回仍处于流式状态的 httpx.Response，
  调用方负责把字节原样转发并在结束后关闭它。
- return_raw_response=False 时返回后端解析后的结果对象。
- 失败统一抛出 domain.exceptions 中的 BusinessError 子类。
"""

from typing import Any, Dict, Protocol


class InferenceClient(Protocol):
    """推理后端客户端协议。"""

    name: str

    async def run(
        self,
        model: str,
        inputs: Dict[str, Any],
        *,
        return_raw_response: bool = True,
    ) -> Any:
        ...

    async def aclose(self) -> None:
        """释放连接池等资源。"""

        ...
