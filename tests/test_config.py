# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from robots_txt.config import CheckerConfig, load_config
from robots_txt.matcher import Precedence


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("user_agent: MyBot/2.0\ntimeout: 3", ".yaml", None),
        (json.dumps({"user_agent": "MyBot/2.0", "timeout": 3}), ".json", None),
        ("user_agent: MyBot/2.0\ntimeout: 3", ".yml", None),
        ("unknown_field: 1", ".yaml", ValidationError),
        ("timeout: -1", ".yaml", ValidationError),
        ("tie_break: sometimes", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("user_agent = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CheckerConfig)
        assert cfg.user_agent == "MyBot/2.0"
        assert cfg.timeout == 3.0


def test_load_config_defaults_without_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == CheckerConfig()
    assert cfg.user_agent == "RobotsTxtBot/1.0"
    assert cfg.precedence is Precedence.ALLOW


def test_load_config_uses_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("tie_break: DISALLOW\n", encoding="utf-8")
    cfg = load_config(None)
    assert cfg.tie_break == "disallow"
    assert cfg.precedence is Precedence.DISALLOW


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_config_is_frozen():
    cfg = CheckerConfig(user_agent="  Spaced/1.0  ")
    assert cfg.user_agent == "Spaced/1.0"
    with pytest.raises(ValidationError):
        cfg.timeout = 5.0
