import json

import pytest

from healthmon.config import Config, load_config

ENV_VARS = ("HEALTH_CHECK_URLS", "CHECK_INTERVAL", "TIMEOUT_SECONDS", "SLOW_THRESHOLD")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config("")
    assert config.check_interval == 30
    assert config.timeout_seconds == 5
    assert config.slow_threshold == 1000
    assert config.urls == []


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("HEALTH_CHECK_URLS", "https://test.com")
    monkeypatch.setenv("CHECK_INTERVAL", "60")
    monkeypatch.setenv("TIMEOUT_SECONDS", "10")
    monkeypatch.setenv("SLOW_THRESHOLD", "2000")

    config = load_config("")
    assert config.urls == ["https://test.com"]
    assert config.check_interval == 60
    assert config.timeout_seconds == 10
    assert config.slow_threshold == 2000


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "urls": ["https://a.example.com", "https://b.example.com"],
                "check_interval": 15,
                "timeout_seconds": 3,
                "slow_threshold": 250,
            }
        )
    )
    config = load_config(str(path))
    assert config == Config(
        urls=["https://a.example.com", "https://b.example.com"],
        check_interval=15,
        timeout_seconds=3,
        slow_threshold=250,
    )
    assert len(config.urls) > 0
    assert config.check_interval >= 1
    assert config.timeout_seconds >= 1
    assert config.slow_threshold >= 1


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"timeout_seconds": 9, "unknown": true}')
    config = load_config(path)
    assert config.timeout_seconds == 9
    assert config.check_interval == 30
    assert config.slow_threshold == 1000


def test_keys_match_case_insensitively(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"Check_Interval": 7}')
    assert load_config(path).check_interval == 7


def test_missing_file_is_ignored(tmp_path):
    config = load_config(str(tmp_path / "absent.json"))
    assert config == Config()


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_config(path)


def test_wrong_type_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"check_interval": "soon"}')
    with pytest.raises(ValueError):
        load_config(path)


def test_float_for_integer_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"slow_threshold": 1.5}')
    with pytest.raises(ValueError):
        load_config(path)


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text('{"urls": ["https://file.example.com"], "check_interval": 5}')
    monkeypatch.setenv("HEALTH_CHECK_URLS", "https://env.example.com")
    monkeypatch.setenv("CHECK_INTERVAL", "12")
    config = load_config(path)
    assert config.urls == ["https://env.example.com"]
    assert config.check_interval == 12


@pytest.mark.parametrize("text", ["abc", "1.5", " 5", "5s", "1_000"])
def test_malformed_environment_integer_ignored(monkeypatch, text):
    monkeypatch.setenv("TIMEOUT_SECONDS", text)
    assert load_config("").timeout_seconds == 5


def test_signed_environment_integer(monkeypatch):
    monkeypatch.setenv("SLOW_THRESHOLD", "+250")
    monkeypatch.setenv("CHECK_INTERVAL", "-3")
    config = load_config("")
    assert config.slow_threshold == 250
    assert config.check_interval == -3