"""Startup validation tests."""

from pathlib import Path

import pytest

from src.app_shell.config import validate_ops_rules
from src.rules.models import DealerRules, OpsRules, ProjectRules


def rules_with(ops: OpsRules) -> DealerRules:
    return DealerRules(project=ProjectRules(slug="dealer-desk", rules_version="1.0"), ops=ops)


def test_creates_data_dir(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    validate_ops_rules(rules_with(OpsRules()), data_dir)
    assert data_dir.is_dir()


def test_missing_env_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEALER_TEST_SECRET", raising=False)
    rules = rules_with(OpsRules(required_env=["DEALER_TEST_SECRET"]))
    with pytest.raises(SystemExit):
        validate_ops_rules(rules, tmp_path)


def test_present_env_passes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEALER_TEST_SECRET", "x")
    rules = rules_with(OpsRules(required_env=["DEALER_TEST_SECRET"], data_dir_required=False))
    validate_ops_rules(rules, tmp_path / "never-created")
    assert not (tmp_path / "never-created").exists()
