"""Fluent builder over SlugOptions"""

from typing import Callable

from pydantic import BaseModel, ConfigDict

from slugsmith.core.models import Case, SlugOptions
from slugsmith.core.pipeline import transform
from slugsmith.core.utils.ids import random_id as default_random_id
from slugsmith.core.utils.translit import transliterate as default_transliterate


class SlugBuilder(BaseModel):
    """Text plus accumulated option overrides; every with_* returns a new builder."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    options: SlugOptions = SlugOptions()

    def _with(self, **changes) -> "SlugBuilder":
        return SlugBuilder(text=self.text, options=self.options.replace(**changes))

    def with_stop_words(self, stop_words: str) -> "SlugBuilder":
        return self._with(stop_words=stop_words)

    def with_separator(self, separator: str) -> "SlugBuilder":
        return self._with(separator=separator)

    def with_max_length(self, max_length: int) -> "SlugBuilder":
        return self._with(max_length=max_length)

    def with_randomness(self, randomness: bool) -> "SlugBuilder":
        return self._with(randomness=randomness)

    def with_randomness_length(self, randomness_length: int) -> "SlugBuilder":
        return self._with(randomness_length=randomness_length)

    def with_case_transform(self, case_transform: Case) -> "SlugBuilder":
        return self._with(case_transform=case_transform)

    def execute(
        self,
        *,
        transliterate: Callable[[str], str] = default_transliterate,
        random_id: Callable[[int], str] = default_random_id,
        ) -> str:
        """Run the pipeline over text with the accumulated options."""
        return transform(self.text, self.options, transliterate=transliterate, random_id=random_id)
