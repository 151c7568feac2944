"""Pydantic model for delimited reader configuration."""
from pydantic import BaseModel, Field, field_validator


class ReaderConfig(BaseModel):
    """Configuration for reading a single delimited text file.

    Validated on construction, so a reader never starts I/O with an
    unusable delimiter or an empty path.
    """

    file_path: str = Field(
        ...,
        min_length=1,
        description="Path to the delimited file to read"
    )
    delimiter: str = Field(
        default=",",
        description="Single field delimiter character (default: comma)"
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="File encoding (default: utf-8)"
    )

    @field_validator('file_path')
    @classmethod
    def validate_file_path(cls, v: str) -> str:
        """Validate file path is not empty."""
        if not v.strip():
            raise ValueError('file_path cannot be empty or whitespace')
        return v.strip()

    @field_validator('delimiter')
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Validate delimiter is one character that can separate fields."""
        if v == "":
            raise ValueError('delimiter cannot be empty')
        if len(v) != 1:
            raise ValueError(f'delimiter must be a single character, got {v!r}')
        if v in ('"', '\r', '\n'):
            raise ValueError(f'delimiter {v!r} cannot separate fields')
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "file_path": "/data/exports/orders_2024.csv",
                "delimiter": ";",
                "encoding": "utf-8"
            }
        }
    }
