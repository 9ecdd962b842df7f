"""Pydantic model for an exported Sheets ``ValueRange`` document."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValueRange(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    range: str | None = None
    major_dimension: Literal["ROWS", "COLUMNS"] = Field(default="ROWS", alias="majorDimension")
    values: list[list[str]] = Field(default_factory=list[list[str]])

    @field_validator("values", mode="before")
    @classmethod
    def _stringify_cells(cls, value: object) -> object:
        # unformatted exports carry numbers and booleans
        if isinstance(value, list):
            return [
                [cell if isinstance(cell, str) else str(cell) for cell in row]
                if isinstance(row, list)
                else row
                for row in value
            ]
        return value
