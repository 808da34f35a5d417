"""Root test configuration: deterministic collaborators for the slug pipeline"""

import pytest


@pytest.fixture(name="fixed_id")
def fixed_id_fixture():
    """random_id stand-in returning a mixed-case, predictable id of the requested length."""
    def _fixed_id(length: int) -> str:
        return ("AbC1dEf2" * (length // 8 + 1))[:length]
    return _fixed_id


@pytest.fixture(name="identity")
def identity_fixture():
    """transliterate stand-in that passes text through untouched."""
    return lambda text: text
