"""Data models for ingredient-lens."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

RiskLevel = Literal["높음", "중간", "낮음"]
Likelihood = Literal["매우 낮음", "낮음", "중간", "높음"]
DataSource = Literal["USDA", "SIMULATED"]

DEFAULT_HAZARD_SOURCES = ("CODEX Alimentarius", "FAO/WHO", "NACMCF")


class HazardCategory(str, Enum):
    """Food-safety classification buckets."""

    PRODUCE = "농산물"
    LIVESTOCK = "축산물"
    SEAFOOD = "수산물"
    GRAIN = "곡류/가공식품"
    FOOD_ADDITIVE = "식품첨가물"
    SPICE = "향신료"
    MEDICINAL_HERB = "한약재"


class ProviderNutrient(BaseModel):
    """A single nutrient row as returned by FoodData Central."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(default="", alias="nutrientName")
    value: int | float | None = None
    unit: str = Field(default="", alias="unitName")

    @field_validator("name", "unit", mode="before")
    @classmethod
    def _none_text(cls, value):
        return "" if value is None else value


class ProviderNutritionRecord(BaseModel):
    """One food record from the nutrition provider (live or simulated)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fdc_id: int | str | None = Field(default=None, alias="fdcId")
    description: str = ""
    food_category: str | None = Field(default=None, alias="foodCategory")
    nutrients: list[ProviderNutrient] = Field(default_factory=list, alias="foodNutrients")
    simulated: bool = False

    @field_validator("food_category", mode="before")
    @classmethod
    def _flatten_category(cls, value):
        # FDC returns either a plain string or {"description": ...} depending on data type.
        if isinstance(value, dict):
            return value.get("description")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value):
        return "" if value is None else value


class HazardEntry(BaseModel):
    """A row of a hazard-analysis table."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    risk_level: RiskLevel = Field(alias="risk")
    likelihood: Likelihood = Field(alias="probability")
    control_measure: str = Field(alias="control")


class HazardProfile(BaseModel):
    """Microbial, chemical and physical hazards for one category."""

    model_config = ConfigDict(frozen=True)

    category: HazardCategory
    microbial: list[HazardEntry]
    chemical: list[HazardEntry]
    physical: list[HazardEntry]
    sources: list[str] = Field(default_factory=lambda: list(DEFAULT_HAZARD_SOURCES))


class Compliance(BaseModel):
    """Regulatory view from the three data sources, in display order."""

    model_config = ConfigDict(frozen=True)

    MFDS: str
    USDA: str
    MHLW: str


class ChartPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: float


class NormalizedResult(BaseModel):
    """Response unit rendered by the dashboard."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    fdcId: int | str
    insight: str
    origin: str
    compliance: Compliance
    handling: list[str]
    chartData: list[ChartPoint] = Field(default_factory=list)
    hazards: HazardProfile | None = None
    dataSource: DataSource = "USDA"

    def to_payload(self) -> dict:
        """Serialize with the field names the frontend reads."""
        return self.model_dump(mode="json", by_alias=True)
