"""Tests for configuration management."""

from pathlib import Path

import pytest

from hubgraph.config import Config, load_settings, validate_setting


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home and working directories at a temporary tree."""
    home_dir = tmp_path / "home"
    work_dir = tmp_path / "work"
    home_dir.mkdir()
    work_dir.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home_dir)
    monkeypatch.chdir(work_dir)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return home_dir


def test_set_get_unset(home: Path) -> None:
    """Test round trip of a local setting."""
    config = Config()
    config.set("github.base_url", "https://ghe.example.com/api/v3")

    assert Config().get("github.base_url") == "https://ghe.example.com/api/v3"

    config.unset("github.base_url")
    assert Config().get("github.base_url") is None


def test_local_overrides_global(home: Path) -> None:
    """Test that local values win and global ones fill the gaps."""
    Config(use_global=True).set("github.token", "global-token")
    Config(use_global=True).set("github.timeout", "10")
    Config().set("github.token", "local-token")

    config = Config()
    assert config.get("github.token") == "local-token"
    assert config.get("github.timeout") == "10"
    assert config.list() == {"github.token": "local-token", "github.timeout": "10"}


def test_reading_does_not_create_directory(home: Path) -> None:
    """Test that merely reading config leaves the working directory untouched."""
    Config().get("github.token")

    assert not (Path.cwd() / ".hubgraph").exists()


def test_invalid_yaml(home: Path) -> None:
    """Test that a malformed config file is reported."""
    config_dir = Path.cwd() / ".hubgraph"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        Config()


def test_load_settings_defaults(home: Path) -> None:
    """Test default settings with no configuration at all."""
    settings = load_settings()

    assert settings.token is None
    assert settings.base_url == "https://api.github.com"
    assert settings.timeout == 30.0


def test_load_settings_token_from_environment(home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that GITHUB_TOKEN is used when no token is configured."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    assert load_settings().token == "env-token"

    Config().set("github.token", "file-token")
    assert load_settings().token == "file-token"


def test_load_settings_invalid_timeout(home: Path) -> None:
    """Test that a non-positive timeout is rejected."""
    Config().set("github.timeout", "-1")

    with pytest.raises(ValueError):
        load_settings()


def test_settings_repr_hides_token(home: Path) -> None:
    """Test that the token never appears in a settings repr."""
    Config().set("github.token", "secret-token")

    assert "secret-token" not in repr(load_settings())


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("github.tokn", "abc"),
        ("github.timeout", "soon"),
        ("github.timeout", "0"),
        ("github.base_url", "api.github.com"),
        ("github.token", "  "),
    ],
)
def test_validate_setting_rejects(key: str, value: str) -> None:
    """Test that unknown keys and unusable values are refused."""
    with pytest.raises(ValueError):
        validate_setting(key, value)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("github.token", "ghp_abc"),
        ("github.timeout", "0.5"),
        ("github.base_url", "https://ghe.example.com/api/v3"),
    ],
)
def test_validate_setting_accepts(key: str, value: str) -> None:
    """Test that known keys with usable values pass."""
    validate_setting(key, value)


def test_fractional_timeout_setting(home: Path) -> None:
    """Test that a sub-second timeout survives loading."""
    Config().set("github.timeout", "0.5")

    assert load_settings().timeout == 0.5
