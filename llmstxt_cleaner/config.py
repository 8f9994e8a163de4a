"""Configuration model and loaders for llmstxt-cleaner.

Responsibilities:
- Define the stage toggles and threshold as a typed dataclass.
- Provide loader entry points for YAML files, environment variables, and
  caller request payloads.

Key types:
- `CleanerConfig`: normalized settings for one cleaning run.
- `ConfigLoader`: static construction helpers for `CleanerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_required_boolean, parse_threshold
from .text.boilerplate import DEFAULT_THRESHOLD

DEFAULT_MAX_INPUT_BYTES = 10 * 1024 * 1024


@dataclass(slots=True)
class CleanerConfig:
    """Runtime configuration for one cleaning run.

    Attributes:
        filter_english: Keep only English-looking lines.
        remove_headers_footers: Strip lines repeated across most pages.
        clean_export: Trim lines, collapse blank runs, and NFC-normalize.
        threshold: Page fraction a line must reach to count as a header/footer.
        max_input_bytes: Upper bound on input file size read by the CLI.
    """

    filter_english: bool = True
    remove_headers_footers: bool = True
    clean_export: bool = True
    threshold: float = DEFAULT_THRESHOLD
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES

    def validate(self) -> None:
        """Validate configuration values before a run."""

        if isinstance(self.threshold, bool) or not isinstance(self.threshold, (int, float)):
            raise ValueError("`threshold` must be a number.")
        if not math.isfinite(self.threshold):
            raise ValueError("`threshold` must be a finite number.")
        if isinstance(self.max_input_bytes, bool) or not isinstance(self.max_input_bytes, int):
            raise ValueError("`max_input_bytes` must be a positive integer.")
        if self.max_input_bytes <= 0:
            raise ValueError("`max_input_bytes` must be a positive integer.")

    def enabled_stages(self) -> tuple[str, ...]:
        """Return enabled stage names in fixed pipeline order."""

        toggles = (
            ("headers_footers", self.remove_headers_footers),
            ("language", self.filter_english),
            ("export", self.clean_export),
        )
        return tuple(name for name, enabled in toggles if enabled)


class ConfigLoader:
    """Factory methods for creating `CleanerConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "filter_english",
            "remove_headers_footers",
            "clean_export",
            "threshold",
            "max_input_bytes",
        }
    )
    _OPTION_KEYS = {
        "filterEnglish": "filter_english",
        "removeHeadersFooters": "remove_headers_footers",
        "cleanExport": "clean_export",
    }

    @staticmethod
    def from_yaml(path: Path) -> CleanerConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CleanerConfig:
        """Create a validated config from `LLMSTXT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        defaults = CleanerConfig()

        filter_english = ConfigLoader._optional_env_boolean(env_map, "LLMSTXT_FILTER_ENGLISH")
        remove_headers_footers = ConfigLoader._optional_env_boolean(
            env_map, "LLMSTXT_REMOVE_HEADERS_FOOTERS"
        )
        clean_export = ConfigLoader._optional_env_boolean(env_map, "LLMSTXT_CLEAN_EXPORT")
        threshold = ConfigLoader._optional_env_threshold(env_map, "LLMSTXT_THRESHOLD")
        max_input_bytes = ConfigLoader._optional_env_positive_int(
            env_map, "LLMSTXT_MAX_INPUT_BYTES"
        )

        config = CleanerConfig(
            filter_english=defaults.filter_english if filter_english is None else filter_english,
            remove_headers_footers=(
                defaults.remove_headers_footers
                if remove_headers_footers is None
                else remove_headers_footers
            ),
            clean_export=defaults.clean_export if clean_export is None else clean_export,
            threshold=defaults.threshold if threshold is None else threshold,
            max_input_bytes=max_input_bytes or defaults.max_input_bytes,
        )
        config.validate()
        return config

    @staticmethod
    def from_options(payload: Mapping[str, Any] | None) -> CleanerConfig:
        """Create a config from caller toggles (`filterEnglish`, `removeHeadersFooters`,
        `cleanExport`, `threshold`).

        Toggles are opt-in: a missing or `null` toggle disables its stage. Unknown
        keys are ignored so request bodies can carry unrelated fields.
        """

        payload = payload or {}
        source_label = "Options"
        toggles = {
            field_name: ConfigLoader._optional_boolean(
                payload, option_key, source_label, default=False
            )
            for option_key, field_name in ConfigLoader._OPTION_KEYS.items()
        }
        threshold = DEFAULT_THRESHOLD
        if payload.get("threshold") is not None:
            threshold = ConfigLoader._threshold_value(payload["threshold"], source_label)

        config = CleanerConfig(threshold=threshold, **toggles)
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> CleanerConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = CleanerConfig()
        threshold = defaults.threshold
        if "threshold" in payload and payload["threshold"] is not None:
            threshold = ConfigLoader._threshold_value(payload["threshold"], source_label)

        config = CleanerConfig(
            filter_english=ConfigLoader._optional_boolean(
                payload, "filter_english", source_label, default=defaults.filter_english
            ),
            remove_headers_footers=ConfigLoader._optional_boolean(
                payload,
                "remove_headers_footers",
                source_label,
                default=defaults.remove_headers_footers,
            ),
            clean_export=ConfigLoader._optional_boolean(
                payload, "clean_export", source_label, default=defaults.clean_export
            ),
            threshold=threshold,
            max_input_bytes=ConfigLoader._optional_positive_int(
                payload, "max_input_bytes", source_label, default=defaults.max_input_bytes
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _threshold_value(raw_value: object, source_label: str) -> float:
        """Parse a threshold field and prefix errors with the value source."""

        try:
            return parse_threshold(raw_value)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload or payload[key] is None:
            return default

        try:
            return parse_required_boolean(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            return parse_required_boolean(raw_value, key)
        except ValueError as exc:
            raise ValueError(f"Environment variable {exc}") from exc

    @staticmethod
    def _optional_env_threshold(env: Mapping[str, str], key: str) -> float | None:
        """Read an optional finite threshold from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        return parse_threshold(raw_value, field_name=key)

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc
        if parsed <= 0:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed
