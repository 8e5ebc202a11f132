import pydantic
import pytest

from essay_router.config.settings import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ESSAY_ROUTER_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    s = Settings(_env_file=None)
    assert s.default_provider == "workers-ai"
    assert s.default_model == "essay-review"
    assert s.ai_gateway_id is None


def test_yaml_source_and_env_priority(monkeypatch, tmp_path):
    cfg = tmp_path / "router.yaml"
    cfg.write_text("port: 9000\nai_gateway_id: gw\nassets_dir: web\n", encoding="utf-8")
    monkeypatch.setenv("ESSAY_ROUTER_CONFIG_FILE", str(cfg))
    monkeypatch.setenv("PORT", "9100")
    s = Settings(_env_file=None)
    assert s.port == 9100
    assert s.ai_gateway_id == "gw"
    assert s.assets_dir == "web"


def test_short_token_rejected(monkeypatch, tmp_path):
    monkeypatch.setenv("ESSAY_ROUTER_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None, cf_api_token="short")
