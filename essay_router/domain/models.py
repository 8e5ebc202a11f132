"""对话请求与推理请求的数据模型。

- ChatMessage: 一条对话消息（system/user/assistant）。
- ChatPayload: /api/chat 请求体，经 pydantic 校验后的结构。
- InferenceRequest: 每次调用推理后端时新建的请求描述。

ChatPayload 只负责“能否转换”，消息顺序与内容原样保留，
system 提示词的注入由 domain.conversation 完成。
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from essay_router.domain.exceptions import MalformedRequestError


# 消息角色（与 Workers AI / OpenAI 的 role 字段对应）
Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """一条对话消息。

    额外字段（如 name）不做校验，原样透传给推理后端。
    """

    model_config = ConfigDict(extra="allow")

    role: Role
    content: str


class ChatPayload(BaseModel):
    """/api/chat 请求体。"""

    model_config = ConfigDict(extra="ignore")

    messages: List[ChatMessage] = Field(default_factory=list)

    @field_validator("messages", mode="before")
    @classmethod
    def default_messages(cls, v: Any) -> Any:
        # null 与缺省等价
        return [] if v is None else v


def parse_chat_payload(raw: bytes) -> ChatPayload:
    """解析请求体；JSON 非法或结构不符时抛出 MalformedRequestError。"""

    try:
        return ChatPayload.model_validate_json(raw or b"")
    except PydanticValidationError as e:
        raise MalformedRequestError(code="MALFORMED_REQUEST", message=str(e))


@dataclass
class InferenceRequest:
    """一次推理调用。

    - model: 厂商模型 ID，例如 "@cf/google/gemma-3-12b-it"。
    - messages: 已注入 system 提示词的消息序列。
    - max_tokens: 输出 token 上限。
    - raw_stream: 为 True 时要求后端返回原始流式 HTTP 响应。
    """

    model: str
    messages: List[ChatMessage]
    max_tokens: int
    raw_stream: bool = True

    def inputs(self) -> Dict[str, Any]:
        """转换为后端 run 接口的 inputs 字段。"""

        return {
            "messages": [m.model_dump() for m in self.messages],
            "max_tokens": self.max_tokens,
        }
