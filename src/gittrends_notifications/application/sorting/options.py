"""Sort options for the trending repository list."""
from __future__ import annotations

import enum


class SortingOption(str, enum.Enum):
    STARS = "Stars"
    FORKS = "Forks"
    ISSUES = "Issues"
    VIEWS = "Views"
    UNIQUE_VIEWS = "UniqueViews"
    CLONES = "Clones"
    UNIQUE_CLONES = "UniqueClones"


DEFAULT_SORTING_OPTION = SortingOption.STARS

__all__ = ["DEFAULT_SORTING_OPTION", "SortingOption"]
