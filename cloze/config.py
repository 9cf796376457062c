"""Configuration for prompt generation and grading.

These configuration models allow tuning the drill, such as the batch size,
how close a guess must be to count as "close", and how the gap is cut out
of the sentence.
"""

from enum import Enum

from pydantic import BaseModel, Field


class SplitStrategy(str, Enum):
    """How the chosen unit is cut out of the joined sentence."""

    # Cut at the chosen unit's own position.
    INDEX = "index"
    # Cut at the first occurrence of the unit's text anywhere in the sentence.
    FIRST_OCCURRENCE = "first_occurrence"


class DrillConfig(BaseModel):
    """Master configuration for a drill session."""

    batch_size: int = Field(default=10, ge=1)
    close_threshold: int = Field(default=3, ge=1)
    split_strategy: SplitStrategy = SplitStrategy.INDEX
    gap_char: str = Field(default="_", min_length=1, max_length=1)
    inverse_gap: str = Field(default="?", min_length=1)
