"""Public call shapes: keyword/positional slugify() and the fluent slug_builder()"""

from typing import Callable, Optional

from slugsmith.core.builder import SlugBuilder
from slugsmith.core.models import Case, SlugOptions
from slugsmith.core.pipeline import transform
from slugsmith.core.utils.ids import random_id as default_random_id
from slugsmith.core.utils.translit import transliterate as default_transliterate


def slugify(
    text: str,
    stop_words: str = "",
    separator: str = "-",
    max_length: Optional[int] = None,
    randomness: bool = False,
    randomness_length: int = 5,
    case_transform: Case = Case.lower,
    *,
    transliterate: Callable[[str], str] = default_transliterate,
    random_id: Callable[[int], str] = default_random_id,
    ) -> str:
    """Convert text to a slug (e.g. 'Hello World' -> 'hello-world').

    Stop words are dropped as literal fragments ('the quick brown fox' with
    stop_words='the,fox' -> 'quick-brown'); separator joins the remaining runs.

    Raises InvalidRandomnessLength for randomness=True with randomness_length=0,
    and pydantic ValidationError for out-of-range values (e.g. max_length=-1).
    """
    options = SlugOptions(
        stop_words=stop_words,
        separator=separator,
        max_length=max_length,
        randomness=randomness,
        randomness_length=randomness_length,
        case_transform=case_transform,
    )
    return transform(text, options, transliterate=transliterate, random_id=random_id)


def slug_builder(text: str, options: SlugOptions = None) -> SlugBuilder:
    """Start a fluent build for text, seeded with options (defaults when None)."""
    return SlugBuilder(text=text, options=options or SlugOptions())
