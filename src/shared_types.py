"""Shared enums and types for moodtrack."""

from enum import IntEnum, StrEnum


class MoodLevel(IntEnum):
    TERRIBLE = 1
    BAD = 2
    OKAY = 3
    GOOD = 4
    EXCELLENT = 5


class MoodTag(StrEnum):
    WORK = "Work"
    SLEEP = "Sleep"
    EXERCISE = "Exercise"
    FOOD = "Food"
    SOCIAL = "Social"
    WEATHER = "Weather"
    HEALTH = "Health"
    STRESS = "Stress"
    FAMILY = "Family"
    HOBBIES = "Hobbies"
    TRAVEL = "Travel"
    MONEY = "Money"


class ExportFormat(StrEnum):
    JSON = "json"
    MARKDOWN = "markdown"
