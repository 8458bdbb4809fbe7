import pytest
from pydantic import ValidationError

from zeta_fn import config as config_module
from zeta_fn import (
    FnConfig, TraceConfig, ConfigError,
    Success, Failure,
    load_yaml, parse_config, load_config, merge_config,
    bind, unwrap_or,
)


def test_defaults():
    config = FnConfig()
    assert config.trace.enabled is False
    assert config.trace.level == "DEBUG"
    assert config.logging.name == "zeta_fn"


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        TraceConfig().enabled = True


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "zeta-fn.yaml"
    path.write_text("trace:\n  enabled: true\n  level: INFO\n  max_length: 3\n", encoding="utf-8")

    result = load_config(path)

    assert isinstance(result, Success)
    assert result.value.trace.enabled is True
    assert result.value.trace.level == "INFO"
    assert result.value.trace.max_length == 3


def test_load_config_missing_file(tmp_path):
    result = load_config(tmp_path / "missing.yaml")
    assert isinstance(result, Failure)
    assert result.error.field == "config_path"


def test_load_yaml_invalid(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("trace: [unclosed\n", encoding="utf-8")
    result = load_yaml(path)
    assert isinstance(result, Failure)
    assert result.error.field == "config_yaml"


def test_load_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    assert isinstance(load_yaml(path), Failure)


def test_load_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml(path) == Success({})


def test_parse_config_validation_error():
    result = parse_config({"trace": {"max_length": 0}})
    assert isinstance(result, Failure)
    assert result.error.code == "CONFIG_ERROR"


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "DEFAULT_PATHS", (tmp_path / "none.yaml",))
    assert load_config() == Success(FnConfig())


def test_load_config_searches_default_paths(tmp_path, monkeypatch):
    path = tmp_path / "zeta-fn.yml"
    path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    monkeypatch.setattr(config_module, "DEFAULT_PATHS", (tmp_path / "none.yaml", path))

    result = load_config()

    assert isinstance(result, Success)
    assert result.value.logging.level == "WARNING"


def test_merge_config_deep():
    base = FnConfig(trace=TraceConfig(max_length=5))
    merged = merge_config(base, {"trace": {"enabled": True}})
    assert merged.trace.enabled is True
    assert merged.trace.max_length == 5
    assert base.trace.enabled is False


def test_bind_and_unwrap_or():
    ok: Success[int] = Success(2)
    err = Failure(ConfigError(field="x", message="bad"))

    assert bind(ok, lambda n: Success(n * 3)) == Success(6)
    assert bind(ok, lambda n: Failure(n)) == Failure(2)
    assert bind(err, lambda n: Success(n)) is err
    assert unwrap_or(ok, 7) == 2
    assert unwrap_or(err, 7) == 7
