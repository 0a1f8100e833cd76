"""CLI helper functions for settings resolution."""

from pathlib import Path

from snapprune.contracts.retention import Alignment
from snapprune.core.config import SnapPruneSettings, load_settings, parse_policy_spec


def resolve_settings(
    *,
    settings_path: Path | None,
    policy_specs: list[str] | None,
    date_format: str | None,
    alignment: Alignment | None,
) -> SnapPruneSettings:
    """Merge a settings file with command-line overrides.

    Precedence: CLI option > settings file (incl. SNAPPRUNE_* env) > default.
    Policies given on the command line replace the file's policies entirely
    rather than being appended to them.

    Args:
        settings_path: Optional YAML settings file
        policy_specs: ``INTERVAL:COUNT`` strings from --policy
        date_format: --date-format value, if given
        alignment: --align value, if given

    Returns:
        Validated SnapPruneSettings

    Raises:
        PolicyError: If a --policy value is malformed
        FileNotFoundError: If settings_path does not exist
        ValidationError: If the merged configuration is invalid (e.g. no policies)
    """
    base: dict[str, object] = {}
    if settings_path is not None:
        base = load_settings(settings_path).model_dump()

    if policy_specs:
        base["policies"] = [{"interval": p.interval, "count": p.count} for p in map(parse_policy_spec, policy_specs)]
    base.setdefault("policies", [])

    if date_format is not None:
        base["date_format"] = date_format

    if alignment is not None:
        base["alignment"] = alignment

    return SnapPruneSettings.model_validate(base)
