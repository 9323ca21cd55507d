import pytest

COMMENT = (
    "Great article! <b>Loved</b> the part about \"context-aware\" escaping & "
    "the /examples/ section. Привет from 東京 \U0001F600 "
) * 50


@pytest.fixture
def comment():
    """A long user comment mixing markup, quotes and non-ASCII text."""
    return COMMENT


@pytest.fixture
def plain_comment():
    """A long comment with nothing to escape for HTML text."""
    return "Nothing special here just words and numbers 12345 " * 50
