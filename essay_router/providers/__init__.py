"""推理 Provider 集成层。

该包下的模块负责：
- 定义 Provider 抽象接口 (base)。
- 维护 Provider 与模型配置 (registry)。
- 提供具体实现 (workers_ai)。
"""

from typing import Optional

from essay_router.config.settings import settings
from essay_router.providers.base import InferenceClient
from essay_router.providers.registry import get_provider_config
from essay_router.providers.workers_ai import WorkersAIClient


def create_provider(name: Optional[str] = None) -> InferenceClient:
    """根据名称创建 Provider 实例，默认取配置中的 provider；未知名称抛出 KeyError。"""

    cfg = get_provider_config(name or getattr(settings, "default_provider", "workers-ai"))
    if cfg.name == "workers-ai":
        return WorkersAIClient(settings)
    raise KeyError(f"No client registered for provider: {cfg.name!r}")
