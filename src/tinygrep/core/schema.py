"""Pydantic v2 models for search requests and presentation options."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Theme(str, Enum):
    blue = "blue"
    green = "green"
    purple = "purple"


# -- Options --


class SearchOptions(BaseModel):
    """How lines are matched and formatted."""

    model_config = ConfigDict(frozen=True)

    case_sensitive: bool = False
    line_numbered: bool = False
    colored: bool = False
    theme: Theme = Theme.blue


# -- Request --


class SearchRequest(BaseModel):
    """Everything the core needs to run one search.

    Built once by the caller; environment and config lookups happen before
    construction, never during the search itself.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    path: Path
    case_sensitive: bool = False
    line_numbered: bool = False
    colored: bool = False
    theme: Theme = Theme.blue

    @property
    def options(self) -> SearchOptions:
        return SearchOptions(
            case_sensitive=self.case_sensitive,
            line_numbered=self.line_numbered,
            colored=self.colored,
            theme=self.theme,
        )
