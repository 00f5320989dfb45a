"""Export configuration schema and loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sassexport.config import ExportConfig, load_export_config
from sassexport.errors import ConfigurationError


def test_default_config() -> None:
    config = load_export_config(None)

    assert config == ExportConfig.default()
    assert config.output.indent == 2
    assert config.output.flat is False
    assert config.input.encoding == "utf-8"


def test_load_from_dict() -> None:
    config = load_export_config({"output": {"flat": True, "indent": 0}})

    assert config.output.flat is True
    assert config.output.indent == 0


def test_load_from_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "sassexport.toml"
    path.write_text(
        '[input]\nencoding = "latin-1"\nmax_workers = 2\n\n[output]\ninclude_params = false\n',
        encoding="utf-8",
    )

    config = load_export_config(path)

    assert config.input.encoding == "latin-1"
    assert config.input.max_workers == 2
    assert config.output.include_params is False


def test_load_from_json_file_path_string(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"output": {"ensure_ascii": true}}', encoding="utf-8")

    assert load_export_config(str(path)).output.ensure_ascii is True


def test_load_inline_strings() -> None:
    assert load_export_config('{"output": {"indent": 4}}').output.indent == 4
    assert load_export_config("[output]\nindent = 6\n").output.indent == 6


def test_inline_toml_table_headers_are_not_json() -> None:
    config = load_export_config('[input]\nmax_workers = 8\n\n[output]\nflat = true\n')

    assert config.input.max_workers == 8
    assert config.output.flat is True


@pytest.mark.parametrize(
    "source",
    [
        {"output": {"indent": 20}},
        {"input": {"max_workers": 0}},
        {"input": {"encoding": "no-such-codec"}},
        {"unknown": True},
        '{"output": ',
        "[1, 2]",
    ],
)
def test_invalid_config_raises_configuration_error(source) -> None:
    with pytest.raises(ConfigurationError):
        load_export_config(source)


def test_unreadable_config_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        load_export_config(tmp_path / "missing.toml")

    assert excinfo.value.path == str(tmp_path / "missing.toml")


def test_unsupported_source_type() -> None:
    with pytest.raises(TypeError):
        load_export_config(42)


def test_round_trip_through_dict() -> None:
    config = ExportConfig.from_dict({"output": {"flat": True}})

    assert ExportConfig.from_dict(config.to_dict()) == config
