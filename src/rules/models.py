from typing import Literal

from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class CurrencyRules(BaseModel):
    symbol: str = "₹"
    # western: 1,234,567  indian: 12,34,567
    grouping: Literal["western", "indian"] = "western"
    decimals: int = Field(default=0, ge=0, le=4)


class AnalyticsRules(BaseModel):
    timezone: str = "UTC"
    week_starts_on: Literal["sunday", "monday"] = "sunday"
    sales_window_months: int = Field(default=12, ge=1)


class OpsRules(BaseModel):
    data_dir_required: bool = True
    required_env: list[str] = Field(default_factory=list)


class DealerRules(BaseModel):
    project: ProjectRules
    currency: CurrencyRules = Field(default_factory=CurrencyRules)
    analytics: AnalyticsRules = Field(default_factory=AnalyticsRules)
    ops: OpsRules = Field(default_factory=OpsRules)
