# tests/core/test_config.py
"""Tests for configuration schema and loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from snapprune.contracts.errors import DurationError, PolicyError
from snapprune.contracts.retention import Alignment, RetentionPolicy


class TestPolicySettings:
    """Single policy validation."""

    def test_integer_interval(self) -> None:
        from snapprune.core.config import PolicySettings

        settings = PolicySettings(interval=86400, count=3)
        assert settings.interval == 86400
        assert settings.count == 3

    def test_duration_string_interval(self) -> None:
        from snapprune.core.config import PolicySettings

        assert PolicySettings(interval="1w", count=6).interval == 604800

    @pytest.mark.parametrize("interval", [0, -5, "0d", "soon"])
    def test_invalid_interval_rejected(self, interval: object) -> None:
        from snapprune.core.config import PolicySettings

        with pytest.raises(ValidationError):
            PolicySettings(interval=interval, count=1)

    def test_negative_count_rejected(self) -> None:
        from snapprune.core.config import PolicySettings

        with pytest.raises(ValidationError):
            PolicySettings(interval=60, count=-1)

    def test_to_policy(self) -> None:
        from snapprune.core.config import PolicySettings

        assert PolicySettings(interval="1d", count=7).to_policy() == RetentionPolicy(interval=86400, count=7)

    def test_settings_are_frozen(self) -> None:
        from snapprune.core.config import PolicySettings

        settings = PolicySettings(interval=60, count=1)
        with pytest.raises(ValidationError):
            settings.count = 2  # type: ignore[misc]


class TestSnapPruneSettings:
    """Top-level settings validation."""

    def test_defaults(self) -> None:
        from snapprune.core.config import DEFAULT_DATE_FORMAT, SnapPruneSettings

        settings = SnapPruneSettings(policies=[{"interval": "1d", "count": 3}])
        assert settings.date_format == DEFAULT_DATE_FORMAT == "%Y%m%d-%H:%M"
        assert settings.alignment is Alignment.ANCHOR

    def test_at_least_one_policy_required(self) -> None:
        from snapprune.core.config import SnapPruneSettings

        with pytest.raises(ValidationError, match="policies"):
            SnapPruneSettings(policies=[])

    def test_date_format_needs_directive(self) -> None:
        from snapprune.core.config import SnapPruneSettings

        with pytest.raises(ValidationError, match="strptime directive"):
            SnapPruneSettings(policies=[{"interval": 60, "count": 1}], date_format="snapshot")

    def test_alignment_from_string(self) -> None:
        from snapprune.core.config import SnapPruneSettings

        settings = SnapPruneSettings(policies=[{"interval": 60, "count": 1}], alignment="interval")
        assert settings.alignment is Alignment.INTERVAL

    def test_unknown_alignment_rejected(self) -> None:
        from snapprune.core.config import SnapPruneSettings

        with pytest.raises(ValidationError):
            SnapPruneSettings(policies=[{"interval": 60, "count": 1}], alignment="midnight")

    def test_retention_policies_preserve_order(self) -> None:
        from snapprune.core.config import SnapPruneSettings

        settings = SnapPruneSettings(policies=[{"interval": "1w", "count": 6}, {"interval": "1d", "count": 3}])
        assert settings.retention_policies() == [
            RetentionPolicy(interval=604800, count=6),
            RetentionPolicy(interval=86400, count=3),
        ]


class TestParsePolicySpec:
    """Command-line INTERVAL:COUNT parsing."""

    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            ("86400:3", RetentionPolicy(interval=86400, count=3)),
            ("1d:7", RetentionPolicy(interval=86400, count=7)),
            ("2w:0", RetentionPolicy(interval=1209600, count=0)),
            (" 6h : 4 ", RetentionPolicy(interval=21600, count=4)),
        ],
    )
    def test_valid_specs(self, spec: str, expected: RetentionPolicy) -> None:
        from snapprune.core.config import parse_policy_spec

        assert parse_policy_spec(spec) == expected

    @pytest.mark.parametrize("spec", ["86400", "86400:", ":3", "1d:x", "1d:1.5", "1d:-1", "", "1d:3:4"])
    def test_malformed_specs(self, spec: str) -> None:
        from snapprune.core.config import parse_policy_spec

        with pytest.raises(PolicyError):
            parse_policy_spec(spec)

    def test_zero_interval(self) -> None:
        from snapprune.core.config import parse_policy_spec

        with pytest.raises(DurationError):
            parse_policy_spec("0:3")


class TestLoadSettings:
    """YAML + environment loading via Dynaconf."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        from snapprune.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text("""
policies:
  - interval: 1d
    count: 3
  - interval: 604800
    count: 6
date_format: "%Y-%m-%d_%H%M"
alignment: interval
""")

        settings = load_settings(config_file)

        assert settings.retention_policies() == [
            RetentionPolicy(interval=86400, count=3),
            RetentionPolicy(interval=604800, count=6),
        ]
        assert settings.date_format == "%Y-%m-%d_%H%M"
        assert settings.alignment is Alignment.INTERVAL

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        from snapprune.core.config import load_settings

        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_policy_raises_validation_error(self, tmp_path: Path) -> None:
        from snapprune.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text("policies:\n  - interval: 0\n    count: 3\n")

        with pytest.raises(ValidationError):
            load_settings(config_file)

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        from snapprune.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text("policies:\n  - interval: 1d\n    count: 3\nalignment: anchor\n")
        monkeypatch.setenv("SNAPPRUNE_ALIGNMENT", "interval")

        assert load_settings(config_file).alignment is Alignment.INTERVAL

    def test_env_var_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        from snapprune.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            "policies:\n  - interval: ${DAILY_INTERVAL:-1d}\n    count: 3\n  - interval: ${WEEKLY_INTERVAL:-1w}\n    count: 2\n"
        )
        monkeypatch.setenv("DAILY_INTERVAL", "12h")
        monkeypatch.delenv("WEEKLY_INTERVAL", raising=False)

        assert load_settings(config_file).retention_policies() == [
            RetentionPolicy(interval=43200, count=3),
            RetentionPolicy(interval=604800, count=2),
        ]

    def test_resolve_config_is_plain_data(self) -> None:
        from snapprune.core.config import SnapPruneSettings, resolve_config

        settings = SnapPruneSettings(policies=[{"interval": "1d", "count": 3}])

        assert resolve_config(settings) == {
            "policies": [{"interval": 86400, "count": 3}],
            "date_format": "%Y%m%d-%H:%M",
            "alignment": "anchor",
        }
