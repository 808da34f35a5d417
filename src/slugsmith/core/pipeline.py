"""Slug transform pipeline: stage functions and the transform() entry point

Stages run in a fixed order:

    transliterate -> trim/space substitution -> stop words -> filter
    -> truncate -> random suffix -> case

Each stage is a plain function over str so it can be tested on its own.
"""

import logging
import string
from typing import Callable

from slugsmith.core.models import Case, SlugOptions
from slugsmith.core.utils.ids import random_id as default_random_id
from slugsmith.core.utils.translit import transliterate as default_transliterate
from slugsmith.errors import InvalidRandomnessLength


logger = logging.getLogger(__name__)

_KEEP = frozenset(string.ascii_letters + string.digits)


def _marker(separator: str) -> str:
    """Single character used for trimming and collapsing; a space when separator is empty."""
    return separator[0] if separator else " "


def trim_and_space(text: str, separator: str) -> str:
    """Strip whitespace and edge markers, then swap literal spaces for the separator."""
    return text.strip().strip(_marker(separator)).replace(" ", separator)


def remove_stop_words(text: str, stop_words: list[str], separator: str) -> str:
    """Replace each stop word, in order, with the separator.

    Matching is a literal, case-insensitive substring match: 'the' also hits
    'feather'. The working string comes back lowercased whenever at least one
    stop word is applied.
    """
    for word in stop_words:
        text = text.lower().replace(word.lower(), separator)
    return text


def filter_chars(text: str, separator: str) -> str:
    """Keep ASCII letters/digits; collapse every other run into one marker.

    Leading boundaries are dropped (the run flag starts set) and one trailing
    marker character is removed, even when it is a letter such as 'x'.
    """
    marker = _marker(separator)
    out: list[str] = []
    in_run = True
    for ch in text:
        if ch in _KEEP:
            out.append(ch)
            in_run = False
        elif not in_run:
            out.append(marker)
            in_run = True
    if out and out[-1] == marker:
        out.pop()
    return "".join(out)


def truncate(text: str, max_length: int | None, separator: str) -> str:
    """Cut to max_length chars and drop markers left dangling by the cut.

    Text already within max_length is returned unchanged.
    """
    if max_length is None or len(text) <= max_length:
        return text
    return text[:max_length].rstrip(_marker(separator))


def append_random(
    text: str,
    options: SlugOptions,
    random_id: Callable[[int], str] = default_random_id,
    ) -> str:
    """Append separator + lowercased id; total suffix length is randomness_length.

    The length contract wins over the edge-separator rule here: an empty slug
    gets a leading separator and randomness_length=1 leaves a trailing one.
    """
    if not options.randomness:
        return text
    if options.randomness_length < 1:
        raise InvalidRandomnessLength(options.randomness_length)
    return text + options.separator + random_id(options.randomness_length - 1).lower()


def apply_case(text: str, case: Case) -> str:
    if case == Case.lower:
        return text.lower()
    if case == Case.upper:
        return text.upper()
    return text


def transform(
    text: str,
    options: SlugOptions = SlugOptions(),
    *,
    transliterate: Callable[[str], str] = default_transliterate,
    random_id: Callable[[int], str] = default_random_id,
    ) -> str:
    """Run text through every stage and return the slug.

    Raises InvalidRandomnessLength when randomness is on with a zero length;
    every other input yields a (possibly empty) string.
    """
    sep = options.separator
    slug = trim_and_space(transliterate(text), sep)
    slug = remove_stop_words(slug, options.stop_word_list, sep)
    slug = filter_chars(slug, sep)
    slug = truncate(slug, options.max_length, sep)
    slug = append_random(slug, options, random_id)
    slug = apply_case(slug, options.case_transform)
    logger.debug("slug %r -> %r", text, slug)
    return slug
