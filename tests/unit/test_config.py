import json

import pytest

from fastfile import config as config_module


def _prepare_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    return config_file


def test_load_config_defaults(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)

    cfg = config_module.load_config()

    assert cfg.es_path is None
    assert cfg.verify is False
    assert cfg.enabled is True


def test_setters_persist_values(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)

    config_module.set_es_path("  D:\\ES\\es.exe ")
    config_module.set_verify(True)
    config_module.set_enabled(False)

    stored = json.loads(config_file.read_text())
    assert stored == {"es_path": "D:\\ES\\es.exe", "verify": True, "enabled": False}

    config_module.set_es_path(None)
    cfg = config_module.load_config()
    assert cfg.es_path is None
    assert cfg.verify is True
    assert cfg.enabled is False


def test_config_dir_context_overrides_location(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    override = tmp_path / "override"

    with config_module.config_dir_context(override):
        config_module.set_verify(True)
        assert config_module.config_file_path() == override.resolve() / "config.json"

    assert (override / "config.json").exists()
    assert config_module.load_config().verify is False


def test_config_from_json_applies_payload():
    base = config_module.Config(es_path="es.exe")
    cfg = config_module.config_from_json('{"verify": "yes", "enabled": 0}', base=base)

    assert cfg.es_path == "es.exe"
    assert cfg.verify is True
    assert cfg.enabled is False
    assert base.verify is False


@pytest.mark.parametrize(
    "payload",
    ["not json", "[1, 2]", {"verify": "maybe"}, {"es_path": 5}],
)
def test_config_from_json_rejects_invalid(payload):
    with pytest.raises(ValueError):
        config_module.config_from_json(payload)


def test_resolve_es_path_order(monkeypatch):
    monkeypatch.delenv(config_module.ENV_ES_PATH, raising=False)
    assert config_module.resolve_es_path(None) == config_module.DEFAULT_ES_EXECUTABLE

    monkeypatch.setenv(config_module.ENV_ES_PATH, "E:\\es.exe")
    assert config_module.resolve_es_path("") == "E:\\es.exe"
    assert config_module.resolve_es_path("C:\\es.exe") == "C:\\es.exe"


def test_resolve_verify_reads_environment(monkeypatch):
    monkeypatch.delenv(config_module.ENV_VERIFY, raising=False)
    assert config_module.resolve_verify(False) is False
    assert config_module.resolve_verify(True) is True

    monkeypatch.setenv(config_module.ENV_VERIFY, "on")
    assert config_module.resolve_verify(False) is True


def test_load_config_coerces_stored_values(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)
    config_file.parent.mkdir(parents=True)
    config_file.write_text('{"es_path": "  ", "verify": "false", "enabled": "no"}')

    cfg = config_module.load_config()

    assert cfg.es_path is None
    assert cfg.verify is False
    assert cfg.enabled is False


def test_load_config_rejects_invalid_values(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)
    config_file.parent.mkdir(parents=True)
    config_file.write_text('{"verify": "maybe"}')

    with pytest.raises(ValueError):
        config_module.load_config()


def test_set_config_dir_switches_and_restores(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    elsewhere = tmp_path / "elsewhere"

    config_module.set_config_dir(elsewhere)
    config_module.set_verify(True)
    assert config_module.config_file_path() == elsewhere.resolve() / "config.json"
    assert json.loads((elsewhere / "config.json").read_text())["verify"] is True

    config_module.set_config_dir(None)
    assert config_module.config_file_path() == config_module.DEFAULT_CONFIG_DIR / "config.json"


def test_set_config_dir_rejects_files(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    target = tmp_path / "file.txt"
    target.write_text("x")

    with pytest.raises(NotADirectoryError):
        config_module.set_config_dir(target)
