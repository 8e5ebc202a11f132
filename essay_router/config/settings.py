"""配置管理模块。

支持从 .env、config.yaml 以及环境变量加载配置。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("ESSAY_ROUTER_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parents[2] / "config.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Config file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read config file {path}: {exc}")
    return {}


class Settings(BaseSettings):
    """路由服务配置。"""

    # ---- Provider 相关配置 ----
    default_provider: str = Field(
        default="workers-ai",
        description="推理 Provider 名称，由 registry 解析",
    )
    default_model: str = Field(
        default="essay-review",
        description="逻辑模型名，由 registry 映射为具体厂商模型",
    )

    # Cloudflare Workers AI
    cf_account_id: Optional[str] = Field(default=None, description="Cloudflare 账号 ID")
    cf_api_token: Optional[str] = Field(default=None, description="Workers AI API Token")
    ai_base_url: str = Field(
        default="https://api.cloudflare.com/client/v4",
        description="Workers AI REST 基础URL",
    )

    # AI Gateway（可选）
    ai_gateway_id: Optional[str] = Field(default=None, description="AI Gateway ID，为空则直连")
    ai_gateway_base_url: str = Field(
        default="https://gateway.ai.cloudflare.com/v1",
        description="AI Gateway 基础URL",
    )
    ai_gateway_skip_cache: bool = Field(default=False, description="是否跳过网关缓存")
    ai_gateway_cache_ttl: int = Field(default=3600, ge=0, description="网关缓存时间（秒）")

    http_timeout: float = Field(default=60.0, ge=1.0, description="HTTP 超时时间（秒）")
    assets_dir: str = Field(default="public", description="前端静态资源目录")
    prompt_locale: str = Field(default="zh", description="系统提示词语言")
    log_dir: str = Field(default="logs", description="日志目录")
    log_redact_content: bool = Field(default=False, description="是否脱敏日志内容")

    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=8787, ge=1, le=65535, description="监听端口")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("cf_api_token")
    @classmethod
    def validate_api_token(cls, v: Optional[str]) -> Optional[str]:
        if v and len(v) < 10:
            raise ValueError("API token seems too short")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


settings = Settings()
