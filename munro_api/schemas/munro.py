"""Munro Schemas — CSV row parsing and JSON response shape.

Invariants:
    - MunroCsvRow aliases are the published table's header names, matched exactly
    - Leading whitespace is trimmed from every cell before type coercion
    - Empty optional numeric cells become None, never 0
    - MunroResponse mirrors the core Munro field-for-field

Design Decisions:
    - Header-driven mapping through aliases: column order in the file is irrelevant
    - extra="ignore": historical classification columns (1891..1997) are not carried
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from munro_api.core.domain_types import HeightInMetres, RunningNumber
from munro_api.core.munro import Munro

_OPTIONAL_NUMERIC: frozenset[str] = frozenset({"dobih_number", "height_in_feet"})


class MunroCsvRow(BaseModel):
    """One data row of the Munro table, keyed by header name."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    running_number: int = Field(alias="Running No")
    name: str = Field(alias="Name")
    height_in_metres: float = Field(alias="Height (m)")
    post_1997: str = Field("", alias="Post 1997")
    dobih_number: int | None = Field(None, alias="DoBIH Number")
    height_in_feet: float | None = Field(None, alias="Height (ft)")
    grid_ref: str = Field("", alias="Grid Ref")
    section: str = Field("", alias="SMC Section")
    map_1_50: str = Field("", alias="Map 1:50")
    comments: str = Field("", alias="Comments")

    @field_validator("*", mode="before")
    @classmethod
    def strip_leading_whitespace(cls, v, info: ValidationInfo):
        # csv.DictReader fills short rows with None
        if v is None:
            v = ""
        if isinstance(v, str):
            v = v.lstrip()
            if not v and info.field_name in _OPTIONAL_NUMERIC:
                return None
        return v

    def to_munro(self) -> Munro:
        return Munro(
            running_number=RunningNumber(self.running_number),
            name=self.name,
            height_in_metres=HeightInMetres(self.height_in_metres),
            category_marker=self.post_1997,
            dobih_number=self.dobih_number,
            height_in_feet=self.height_in_feet,
            grid_ref=self.grid_ref,
            section=self.section,
            map_1_50=self.map_1_50,
            comments=self.comments,
        )


class MunroResponse(BaseModel):
    """Public-facing Munro record."""
    running_number: int
    name: str
    height_in_metres: float
    height_in_feet: float | None = None
    category_marker: str
    dobih_number: int | None = None
    grid_ref: str = ""
    section: str = ""
    map_1_50: str = ""
    comments: str = ""

    @classmethod
    def from_munro(cls, munro: Munro) -> "MunroResponse":
        return cls(
            running_number=munro.running_number,
            name=munro.name,
            height_in_metres=munro.height_in_metres,
            height_in_feet=munro.height_in_feet,
            category_marker=munro.category_marker,
            dobih_number=munro.dobih_number,
            grid_ref=munro.grid_ref,
            section=munro.section,
            map_1_50=munro.map_1_50,
            comments=munro.comments,
        )
