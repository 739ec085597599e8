import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from syllable_counter.core import SyllableCounter, clear_dictionary_cache


@pytest.fixture
def fresh_dictionary_cache():
    """Ensure dictionary loads in a test read from disk and do not leak out."""

    clear_dictionary_cache()
    yield
    clear_dictionary_cache()


@pytest.fixture
def heuristic_counter():
    """Counter with an empty dictionary so every valid word hits the heuristic."""

    return SyllableCounter(dictionary={})
