"""Rules file loading tests."""

from pathlib import Path

import pytest

from src.rules.loader import load_rules

MINIMAL = """
project:
  slug: dealer-desk
  rules_version: "1.0"
"""


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repository_rules_file_loads() -> None:
    rules = load_rules(Path("rules.yaml"))
    assert rules.project.slug == "dealer-desk"
    assert rules.currency.grouping in ("western", "indian")
    assert rules.analytics.sales_window_months >= 1


def test_defaults_fill_missing_sections(tmp_path: Path) -> None:
    rules = load_rules(write(tmp_path, MINIMAL))
    assert rules.currency.symbol == "₹"
    assert rules.analytics.week_starts_on == "sunday"
    assert rules.analytics.sales_window_months == 12
    assert rules.ops.required_env == []


def test_fenced_block(tmp_path: Path) -> None:
    text = "# Rules\n\nSome prose.\n\n```yaml" + MINIMAL + "analytics:\n  week_starts_on: monday\n```\n"
    rules = load_rules(write(tmp_path, text))
    assert rules.analytics.week_starts_on == "monday"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_rules(write(tmp_path, "project: [unclosed"))


def test_schema_violation(tmp_path: Path) -> None:
    text = MINIMAL + "currency:\n  grouping: roman\n"
    with pytest.raises(ValueError, match="validation failed"):
        load_rules(write(tmp_path, text))
