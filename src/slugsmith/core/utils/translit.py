"""Unicode to ASCII transliteration"""

from unidecode import unidecode


def transliterate(text: str) -> str:
    """Best-effort ASCII rendition of text (e.g. '影師嗎' -> 'Ying Shi Ma ')."""
    return unidecode(text)
