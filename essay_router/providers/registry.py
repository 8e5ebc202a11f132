"""Provider 与模型配置。

本模块将“逻辑模型名”与“具体厂商模型名”解耦：

- 逻辑名（logical_name）：在代码里使用的统一名称，例如 "essay-review"。
- provider_model：厂商实际提供的模型 ID，例如 "@cf/google/gemma-3-12b-it"。

上层只关心逻辑名，具体用哪个底层模型由这里集中配置，便于后续升级或切换。"""

from dataclasses import dataclass
from typing import Dict, Mapping


@dataclass(frozen=True)
class ModelConfig:
    """单个逻辑模型的配置。"""

    logical_name: str
    provider_model: str
    max_tokens: int


@dataclass(frozen=True)
class ProviderConfig:
    """某个 Provider 的整体配置。"""

    name: str
    base_url: str
    models: Dict[str, ModelConfig]


# Cloudflare Workers AI 配置
# 模型列表: https://developers.cloudflare.com/workers-ai/models/
WORKERS_AI_CONFIG = ProviderConfig(
    name="workers-ai",
    base_url="https://api.cloudflare.com/client/v4",
    models={
        "essay-review": ModelConfig(
            logical_name="essay-review",
            provider_model="@cf/google/gemma-3-12b-it",
            max_tokens=1024,
        )
    },
)


PROVIDER_REGISTRY: Mapping[str, ProviderConfig] = {
    "workers-ai": WORKERS_AI_CONFIG,
}


def get_provider_config(name: str) -> ProviderConfig:
    """根据名称获取 ProviderConfig，名称不区分大小写。"""

    key = name.lower()
    for k, cfg in PROVIDER_REGISTRY.items():
        if k.lower() == key:
            return cfg
    raise KeyError(f"Unknown provider: {name!r}")


def get_model_config(provider: str, model: str) -> ModelConfig:
    """根据 Provider 与逻辑模型名获取 ModelConfig。"""

    cfg = get_provider_config(provider)
    try:
        return cfg.models[model]
    except KeyError:
        raise KeyError(f"Unknown model {model!r} for provider {cfg.name!r}") from None
