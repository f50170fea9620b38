from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator


class InspectConfig(BaseModel):
    max_chars: int | None = None
    strict_closers: bool = False
    indent: int = 2
    output_format: Literal["report", "json"] = "report"
    per_line: bool = False

    @field_validator("max_chars")
    @classmethod
    def validate_max_chars(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError("max_chars must be >= 1")
        return value

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, value: int) -> int:
        if not 0 <= value <= 8:
            raise ValueError("indent must be between 0 and 8")
        return value
