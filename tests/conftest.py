import pytest
from django.template import engines

# Strings that exercise every branch of the escapers.
SAMPLES = [
    "",
    "hello123",
    "Hello World",
    "<script>alert('xss')</script>",
    "\"&<>'/\\;`()[]{}=+%~ ",
    "\0\x01\x05\x1f\x7f\x80\x9f\t\n\r",
    "café crème brûlée ÿ",
    "Привет Мир",
    "こんにちは世界",
    "emoji \U0001F600 and \U00010348",
    "lone \ud800 surrogate \udfff",
    "javascript:alert(1)",
    "\u00a0\u2028\ufeff\ufffd",
    "".join(chr(cp) for cp in range(0x100)),
]


@pytest.fixture(params=SAMPLES)
def sample(request):
    return request.param


@pytest.fixture
def render():
    """Render a template string with the filter library loaded explicitly."""
    from_string = engines["django"].from_string

    def _render(template_string, context=None):
        return from_string("{% load escapers %}" + template_string).render(context or {})

    return _render


@pytest.fixture
def render_builtin():
    """Render a template string with the filters registered as builtins."""
    from_string = engines["builtins"].from_string

    def _render(template_string, context=None):
        return from_string(template_string).render(context or {})

    return _render
