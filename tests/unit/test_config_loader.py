"""Unit tests for YAML, environment, and request-option configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from llmstxt_cleaner.config import DEFAULT_MAX_INPUT_BYTES, CleanerConfig, ConfigLoader


def test_cleaner_config_defaults_enable_every_stage() -> None:
    config = CleanerConfig()

    assert config.enabled_stages() == ("headers_footers", "language", "export")
    assert config.threshold == 0.6
    assert config.max_input_bytes == DEFAULT_MAX_INPUT_BYTES


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"threshold": float("inf")}, "finite"),
        ({"threshold": "0.6"}, "must be a number"),
        ({"threshold": True}, "must be a number"),
        ({"max_input_bytes": 0}, "positive integer"),
    ],
)
def test_cleaner_config_validate_rejects_invalid_values(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        CleanerConfig(**kwargs).validate()


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "llmstxt.yml"
    config_path.write_text(
        """
filter_english: " no "
remove_headers_footers: true
clean_export: "off"
threshold: " 0.75 "
max_input_bytes: 2048
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.filter_english is False
    assert config.remove_headers_footers is True
    assert config.clean_export is False
    assert config.threshold == 0.75
    assert config.max_input_bytes == 2048


def test_config_loader_from_yaml_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == CleanerConfig()


def test_config_loader_from_yaml_rejects_unknown_keys_and_non_mappings(tmp_path: Path) -> None:
    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("threshold: 0.5\nlanguage: en\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): language"):
        ConfigLoader.from_yaml(unknown_path)

    list_path = tmp_path / "list.yml"
    list_path.write_text("- threshold\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)


def test_config_loader_from_yaml_rejects_invalid_typed_values(tmp_path: Path) -> None:
    bool_path = tmp_path / "bool.yml"
    bool_path.write_text("filter_english: maybe\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`filter_english` must be a boolean value"):
        ConfigLoader.from_yaml(bool_path)

    threshold_path = tmp_path / "threshold.yml"
    threshold_path.write_text("threshold: high\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`threshold` must be a number"):
        ConfigLoader.from_yaml(threshold_path)

    size_path = tmp_path / "size.yml"
    size_path.write_text("max_input_bytes: -1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`max_input_bytes` must be a positive integer"):
        ConfigLoader.from_yaml(size_path)


def test_config_loader_from_env_reads_llmstxt_variables() -> None:
    config = ConfigLoader.from_env(
        {
            "LLMSTXT_FILTER_ENGLISH": "false",
            "LLMSTXT_REMOVE_HEADERS_FOOTERS": " 1 ",
            "LLMSTXT_CLEAN_EXPORT": "",
            "LLMSTXT_THRESHOLD": "0.9",
            "LLMSTXT_MAX_INPUT_BYTES": "4096",
            "UNRELATED": "value",
        }
    )

    assert config.filter_english is False
    assert config.remove_headers_footers is True
    assert config.clean_export is True
    assert config.threshold == 0.9
    assert config.max_input_bytes == 4096


def test_config_loader_from_env_defaults_when_unset() -> None:
    assert ConfigLoader.from_env({}) == CleanerConfig()


@pytest.mark.parametrize(
    ("env", "message"),
    [
        ({"LLMSTXT_CLEAN_EXPORT": "sometimes"}, "LLMSTXT_CLEAN_EXPORT"),
        ({"LLMSTXT_THRESHOLD": "abc"}, "LLMSTXT_THRESHOLD"),
        ({"LLMSTXT_THRESHOLD": "nan"}, "finite"),
        ({"LLMSTXT_MAX_INPUT_BYTES": "0"}, "LLMSTXT_MAX_INPUT_BYTES"),
    ],
)
def test_config_loader_from_env_rejects_invalid_values(env: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_env(env)


def test_config_loader_from_options_maps_camel_case_toggles() -> None:
    config = ConfigLoader.from_options(
        {
            "filterEnglish": True,
            "removeHeadersFooters": "yes",
            "cleanExport": False,
            "threshold": "0.8",
            "url": "https://example.com",
        }
    )

    assert config.filter_english is True
    assert config.remove_headers_footers is True
    assert config.clean_export is False
    assert config.threshold == 0.8


def test_config_loader_from_options_treats_missing_toggles_as_disabled() -> None:
    config = ConfigLoader.from_options({"cleanExport": None})

    assert config.enabled_stages() == ()
    assert config.threshold == 0.6
    assert ConfigLoader.from_options(None).enabled_stages() == ()


def test_config_loader_from_options_rejects_invalid_values() -> None:
    with pytest.raises(ValueError, match="`filterEnglish` must be a boolean value"):
        ConfigLoader.from_options({"filterEnglish": "perhaps"})

    with pytest.raises(ValueError, match="`threshold` must be a number"):
        ConfigLoader.from_options({"threshold": [0.5]})


def test_config_loader_boolean_errors_name_the_source_and_accepted_tokens(
    tmp_path: Path,
) -> None:
    """YAML, environment, and option booleans share one error message format."""

    tokens = r"must be a boolean value \(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
    config_path = tmp_path / "llmstxt.yml"
    config_path.write_text("clean_export: maybe\n", encoding="utf-8")

    with pytest.raises(ValueError, match=rf"^YAML `.*` field `clean_export` {tokens}$"):
        ConfigLoader.from_yaml(config_path)

    with pytest.raises(
        ValueError, match=rf"^Environment variable `LLMSTXT_FILTER_ENGLISH` {tokens}$"
    ):
        ConfigLoader.from_env({"LLMSTXT_FILTER_ENGLISH": "maybe"})

    with pytest.raises(ValueError, match=rf"^Options field `removeHeadersFooters` {tokens}$"):
        ConfigLoader.from_options({"removeHeadersFooters": "maybe"})
