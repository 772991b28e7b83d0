"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanaset import logger as kanaset_logger


@pytest.fixture
def hiragana_syllables():
    """Basic hiragana syllabary with voiced, half-voiced and small kana."""
    return (
        "あいうえおかきくけこがぎぐげごさしすせそざじずぜぞ"
        "たちつてとだぢづでどなにぬねのはひふへほばびぶべぼぱぴぷぺぽ"
        "まみむめもやゆよらりるれろわをんぁぃぅぇぉゃゅょっ"
    )


@pytest.fixture
def katakana_syllables():
    """Katakana counterpart of ``hiragana_syllables``."""
    return (
        "アイウエオカキクケコガギグゲゴサシスセソザジズゼゾ"
        "タチツテトダヂヅデドナニヌネノハヒフヘホバビブベボパピプペポ"
        "マミムメモヤユヨラリルレロワヲンァィゥェォャュョッ"
    )


@pytest.fixture
def reset_console_logging():
    """Detach console handlers installed by ``configure_logging``."""
    yield
    for handler in kanaset_logger._console_handlers:
        kanaset_logger.logger.removeHandler(handler)
    kanaset_logger._console_handlers.clear()
    kanaset_logger.logger.setLevel(0)
