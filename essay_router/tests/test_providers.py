import pytest

from essay_router.api.chat import ChatConfig
from essay_router.prompts import load_system_prompt
from essay_router.providers import create_provider
from essay_router.providers.registry import get_model_config
from essay_router.providers.workers_ai import WorkersAIClient


def test_create_provider_default(monkeypatch):
    class DummySettings:
        default_provider = "workers-ai"

    monkeypatch.setattr("essay_router.providers.settings", DummySettings())
    assert isinstance(create_provider(), WorkersAIClient)


def test_create_provider_unknown():
    with pytest.raises(KeyError):
        create_provider("kimi")


def test_model_registry():
    cfg = get_model_config("Workers-AI", "essay-review")
    assert cfg.provider_model == "@cf/google/gemma-3-12b-it"
    assert cfg.max_tokens == 1024
    with pytest.raises(KeyError):
        get_model_config("workers-ai", "nope")


def test_system_prompt_has_placeholder():
    text = load_system_prompt("essay-review", "zh")
    assert "{essay}" in text
    assert "高中英语老师" in text


def test_chat_config_from_settings():
    class DummySettings:
        default_provider = "workers-ai"
        default_model = "essay-review"
        prompt_locale = "zh"

    cfg = ChatConfig.from_settings(DummySettings())
    assert cfg.model_id == "@cf/google/gemma-3-12b-it"
    assert cfg.max_tokens == 1024
    assert cfg.system_prompt == load_system_prompt()
