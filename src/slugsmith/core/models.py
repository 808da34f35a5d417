"""Slug option models shared by the pipeline, builder and config loader"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Case(str, Enum):
    """Final casing applied to the whole slug, random suffix included"""
    lower = "lower"
    upper = "upper"
    preserve = "preserve"


class SlugOptions(BaseModel):
    """Immutable set of knobs for a single slug transform."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    stop_words:        str = Field(default="",  description="Comma-separated literal fragments to drop")
    separator:         str = Field(default="-", description="Join character; may be empty or whitespace")
    max_length:        Optional[int] = Field(default=None, ge=0, description="Max chars before the random suffix")
    randomness:        bool = Field(default=False, description="Append a random suffix")
    randomness_length: int = Field(default=5, ge=0, description="Suffix length including its separator")
    case_transform:    Case = Case.lower

    @property
    def stop_word_list(self) -> list[str]:
        """Non-empty stop words in configured order."""
        return [w for w in self.stop_words.split(",") if w]

    def replace(self, **changes) -> "SlugOptions":
        """Return a validated copy with changes applied (model_copy skips validation)."""
        return SlugOptions.model_validate({**self.model_dump(), **changes})
