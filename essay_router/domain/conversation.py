from typing import List, Sequence, Tuple

from .models import ChatMessage


def has_system_message(messages: Sequence[ChatMessage]) -> bool:
    return any(m.role == "system" for m in messages)


def ensure_system_prompt(messages: Sequence[ChatMessage], prompt: str) -> Tuple[List[ChatMessage], bool]:
    """若序列中没有 system 消息，则在首位插入一条内容为 prompt 的 system 消息。

    只按“是否存在”判断，不比较内容；原序列不会被修改。
    返回 (新序列, 是否发生注入)。
    """

    if has_system_message(messages):
        return list(messages), False
    return [ChatMessage(role="system", content=prompt), *messages], True
