"""Essay Router 顶层包。

接收前端的对话请求，注入英语作文批改的系统提示词，
转发给 Workers AI 并把流式结果原样返回。
"""

from essay_router.api.app import create_app

__all__ = ["create_app"]
