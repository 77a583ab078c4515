from pathlib import Path

import pytest
from ordertally.core.config import ConfigError, TallyConfig, load_config


def test_defaults():
    cfg = TallyConfig()
    assert cfg.decimal_places == 2
    assert cfg.max_attempts == 3
    assert cfg.output_format == "text"
    assert cfg.log_level == "WARNING"


def test_load_config_from_yaml(tmp_path: Path):
    f = tmp_path / "ordertally.yaml"
    f.write_text("decimal_places: 3\noutput_format: json\nmax_attempts: 5\n", encoding="utf-8")

    cfg = load_config(f)

    assert cfg == TallyConfig(decimal_places=3, output_format="json", max_attempts=5)


def test_load_config_empty_file_gives_defaults(tmp_path: Path):
    f = tmp_path / "ordertally.yaml"
    f.write_text("", encoding="utf-8")
    assert load_config(f) == TallyConfig()


def test_load_config_without_path_uses_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config() == TallyConfig()

    (tmp_path / "ordertally.yaml").write_text("output_format: yaml\n", encoding="utf-8")
    assert load_config().output_format == "yaml"


@pytest.mark.parametrize(
    "text, code",
    [
        ("- 1\n", "invalid_config"),
        ("colour: red\n", "unknown_config_keys"),
        ("decimal_places: two\n", "invalid_decimal_places"),
        ("decimal_places: -1\n", "invalid_decimal_places"),
        ("max_attempts: 0\n", "invalid_max_attempts"),
        ("output_format: xml\n", "invalid_output_format"),
        ("log_level: LOUD\n", "invalid_log_level"),
        ("a: [\n", "unreadable_config"),
    ],
)
def test_load_config_errors(tmp_path: Path, text: str, code: str):
    f = tmp_path / "ordertally.yaml"
    f.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(f)
    assert e.value.code == code


def test_load_config_non_utf8_file(tmp_path: Path):
    f = tmp_path / "ordertally.yaml"
    f.write_bytes(b"output_format: \xff\n")
    with pytest.raises(ConfigError) as e:
        load_config(f)
    assert e.value.code == "unreadable_config"


def test_load_config_missing_explicit_file(tmp_path: Path):
    with pytest.raises(ConfigError) as e:
        load_config(tmp_path / "missing.yaml")
    assert e.value.code == "config_not_found"


def test_with_overrides_ignores_none():
    cfg = TallyConfig(output_format="json").with_overrides(output_format=None, log_level="debug")
    assert cfg.output_format == "json"
    assert cfg.log_level == "debug"
