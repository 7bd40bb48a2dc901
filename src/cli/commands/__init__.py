"""CLI command modules."""

from .analytics import stats, tags
from .entries import entries, log, suggest
from .export import export
from .init import init
from .mood import calendar, trend, week
from .serve import serve

__all__ = [
    "log",
    "suggest",
    "entries",
    "week",
    "calendar",
    "trend",
    "stats",
    "tags",
    "export",
    "init",
    "serve",
]
