"""Mood labels attached to journal entries and artwork."""

from enum import Enum


class Mood(str, Enum):
    """The six moods a user can tag an entry with."""

    HAPPY = "Happy"
    CALM = "Calm"
    NEUTRAL = "Neutral"
    SAD = "Sad"
    ANGRY = "Angry"
    ANXIOUS = "Anxious"
