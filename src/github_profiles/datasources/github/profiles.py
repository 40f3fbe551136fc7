from dataclasses import dataclass
from typing import Any, Iterable, List

import polars as pl

from github_profiles.models import Row
from github_profiles.transformation.schemas import (
    PROFILE_FRAME_SCHEMA,
    describe_schema,
)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class ProfileListing:
    """Tabular view of profile rows restricted to the declared columns"""

    df: pl.DataFrame

    @classmethod
    def of(cls, rows: Iterable[Row]) -> "ProfileListing":
        """Create instance from normalized rows"""
        columns = describe_schema().column_names()
        records = [{name: _as_text(row.get(name)) for name in columns} for row in rows]

        # Use explicit schema to avoid inference issues on empty or all-null columns
        return cls(df=pl.DataFrame(records, schema=PROFILE_FRAME_SCHEMA))

    def logins(self) -> List[str]:
        return self.df.get_column("login").drop_nulls().to_list()

    def get_profile(self, login: str) -> dict:
        """Get a single profile by login"""
        profile_row = self.df.filter(pl.col("login") == login)
        if profile_row.height == 0:
            raise ValueError(f"Profile {login} not found in listing")

        return profile_row.to_dicts()[0]
