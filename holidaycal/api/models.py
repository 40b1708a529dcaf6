"""Data models for the canada-holidays.ca API."""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Holiday(BaseModel):
    """A single statutory holiday as delivered by the provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Optional[int] = None
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    name_en: str = Field(..., alias="nameEn")
    name_fr: Optional[str] = Field(default=None, alias="nameFr")
    federal: bool = Field(default=False, description="Nationally observed holiday")
    observed_date: Optional[str] = Field(default=None, alias="observedDate")

    @property
    def is_federal(self) -> bool:
        return self.federal

    def as_date(self) -> datetime.date:
        """Return the holiday date as a ``datetime.date``."""
        return datetime.date.fromisoformat(self.date)


class Province(BaseModel):
    """Province or territory with its holidays for one year."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name_en: str = Field(..., alias="nameEn")
    name_fr: Optional[str] = Field(default=None, alias="nameFr")
    holidays: List[Holiday] = Field(default_factory=list)


class ProvinceHolidays(BaseModel):
    """Top-level response of ``/provinces/{code}?year={year}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    province: Province

    @property
    def holidays(self) -> List[Holiday]:
        return self.province.holidays

    @property
    def holiday_dates(self) -> frozenset:
        return frozenset(holiday.date for holiday in self.province.holidays)
