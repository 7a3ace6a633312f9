from __future__ import annotations

from pathlib import Path

from tubeflow.config.settings import ApiConfig, Settings, _load_api_config


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("MANUSCRIPT_DIR", "INDEX_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.manuscript_dir == Path("manuscript")
    assert settings.index_path == Path("index.yaml")
    assert settings.log_level == "INFO"
    assert settings.api == ApiConfig()


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MANUSCRIPT_DIR", str(tmp_path / "videos"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.manuscript_dir == tmp_path / "videos"
    assert settings.log_level == "DEBUG"


def test_api_section_from_settings_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "settings.yaml").write_text(
        "api:\n  host: 127.0.0.1\n  port: 9000\n  cors_origins:\n    - http://localhost:3000\nother: ignored\n",
        encoding="utf-8",
    )

    settings = Settings()

    assert settings.api == ApiConfig(host="127.0.0.1", port=9000, cors_origins=["http://localhost:3000"])


def test_missing_settings_file_uses_defaults(tmp_path):
    assert _load_api_config(tmp_path / "absent.yaml") == ApiConfig()


def test_settings_file_without_api_section(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("video:\n  defaults: {}\n", encoding="utf-8")

    assert _load_api_config(path) == ApiConfig()
