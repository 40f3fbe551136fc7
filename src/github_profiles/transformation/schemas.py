"""
Profile Table Schema

Static declaration of the table the host syncs: column names, types and the
indirect lookup joining a GitHub login to a local contact.
"""

from enum import Enum
from typing import List, Optional

import polars as pl
from pydantic import BaseModel, Field, field_validator, model_validator

PROFILE_TABLE_NAME = "githubProfile"


class ColumnType(str, Enum):
    TEXT = "text"
    URL = "url"
    INDIRECT_LOOKUP = "indirect_lookup"


class Column(BaseModel):
    """Schema for a single column of an external table"""

    name: str = Field(..., description="Column name as it appears in rows")
    type: ColumnType = Field(ColumnType.TEXT, description="Column data type")
    length: Optional[int] = Field(None, description="Maximum text length")
    description: Optional[str] = Field(None, description="Column label")
    reference_to: Optional[str] = Field(
        None, description="Local entity joined by an indirect lookup"
    )
    reference_field: Optional[str] = Field(
        None, description="Field on the local entity holding the external value"
    )

    @model_validator(mode="after")
    def validate_lookup_target(self):
        """Indirect lookups must name the local entity and field they join to"""
        if self.type == ColumnType.INDIRECT_LOOKUP and not (
            self.reference_to and self.reference_field
        ):
            raise ValueError(
                f"Indirect lookup column '{self.name}' needs reference_to and reference_field"
            )
        return self


class TableSchema(BaseModel):
    """Schema for one external table"""

    name: str = Field(..., description="Table API name")
    label: str = Field(..., description="Display label")
    name_column: str = Field(..., description="Column identifying a row to users")
    columns: List[Column] = Field(..., description="Columns in declaration order")

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v):
        """Ensure column names are unique and there is exactly one indirect lookup"""
        names = [column.name for column in v]
        if len(names) != len(set(names)):
            raise ValueError("All columns must have unique names")

        lookups = [c for c in v if c.type == ColumnType.INDIRECT_LOOKUP]
        if len(lookups) != 1:
            raise ValueError(
                f"Exactly one indirect lookup column is required, found {len(lookups)}"
            )
        return v

    @model_validator(mode="after")
    def validate_name_column(self):
        if self.name_column not in self.column_names():
            raise ValueError(f"Name column '{self.name_column}' is not a column")
        return self

    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    def get_column(self, name: str) -> Column:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(name)


def describe_schema() -> TableSchema:
    """Static schema of the GitHub profile table"""
    return TableSchema(
        name=PROFILE_TABLE_NAME,
        label="GitHub Profile",
        name_column="login",
        columns=[
            Column(
                name="login",
                type=ColumnType.INDIRECT_LOOKUP,
                length=255,
                description="GitHub Username",
                reference_to="Contact",
                reference_field="github_username",
            ),
            Column(name="id", length=255, description="GitHub ID"),
            Column(name="name", length=255, description="Full Name"),
            Column(name="company", length=255, description="Company"),
            Column(name="bio", length=255, description="Biography"),
            Column(name="followers", length=255, description="Followers"),
            Column(name="following", length=255, description="Following"),
            Column(name="html_url", type=ColumnType.URL, description="Profile URL"),
            Column(name="DisplayUrl", type=ColumnType.URL, description="Display URL"),
            Column(name="ExternalId", length=255, description="External ID"),
        ],
    )


def polars_schema(table: TableSchema) -> pl.Schema:
    """Tabular schema for a table; every column is carried as text"""
    return pl.Schema([(name, pl.String()) for name in table.column_names()])


PROFILE_FRAME_SCHEMA = polars_schema(describe_schema())
