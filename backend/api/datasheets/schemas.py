from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional

class DatasheetBase(BaseModel):
    vendor: str = Field(..., min_length=1)
    part_number: str = Field(..., min_length=1)
    datasheet_url: str = Field(..., min_length=1)
    notes: str = ""

class DatasheetCreate(DatasheetBase):
    pass

class DatasheetUpdate(BaseModel):
    vendor: Optional[str] = Field(None, min_length=1)
    part_number: Optional[str] = Field(None, min_length=1)
    datasheet_url: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None

    # omitted fields stay unchanged, an explicit null is not a value
    @field_validator("vendor", "part_number", "datasheet_url")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may be omitted but not null")
        return value

    @field_validator("notes")
    @classmethod
    def null_notes_are_empty(cls, value):
        return value if value is not None else ""

class Datasheet(DatasheetBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
