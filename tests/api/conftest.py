import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_expense_repo, get_rules, get_time_adapter, get_vehicle_repo
from src.api.main import app
from src.rules.models import AnalyticsRules, DealerRules, ProjectRules


@pytest.fixture
def rules() -> DealerRules:
    return DealerRules(
        project=ProjectRules(slug="dealer-desk", rules_version="test"),
        analytics=AnalyticsRules(sales_window_months=6),
    )


@pytest.fixture
def client(vehicle_repo, expense_repo, frozen_time, rules):
    """Test client over the in-memory fleet; startup hooks are not run."""
    app.dependency_overrides[get_vehicle_repo] = lambda: vehicle_repo
    app.dependency_overrides[get_expense_repo] = lambda: expense_repo
    app.dependency_overrides[get_time_adapter] = lambda: frozen_time
    app.dependency_overrides[get_rules] = lambda: rules
    yield TestClient(app)
    app.dependency_overrides.clear()
