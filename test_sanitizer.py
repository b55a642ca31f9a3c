import pytest

from errors import MalformedInput
from sanitizer import sanitize

SAMPLES = [
    "",
    "plain text",
    "a < b && c > d",
    "<script>alert(1)</script>",
    "<img src=x onerror=alert(1)>",
    '<a href="javascript:alert(1)">click</a>',
    '<a href="https://example.com" onclick="x()">ok</a>',
    "<b>bold</b> and <i>italic</i>",
    "<p>para<!-- hidden --></p>",
    "<div><span>nested</span></div>",
    "&lt;script&gt;",
    "<iframe src=//evil></iframe>text",
]


@pytest.mark.parametrize("raw", SAMPLES)
def test_sanitize_is_idempotent(raw):
    once = sanitize(raw)
    assert sanitize(once) == once


def test_script_tag_removed():
    out = sanitize("<script>alert(1)</script>")
    assert "<script>" not in out.lower()
    assert out == "alert(1)"


def test_event_handler_and_unknown_tag_removed():
    out = sanitize("<img src=x onerror=alert(1)>")
    assert "<img" not in out
    assert "onerror" not in out


def test_allowed_markup_kept():
    assert sanitize("<b>bold</b>") == "<b>bold</b>"
    assert sanitize('<a href="https://example.com">x</a>') == '<a href="https://example.com">x</a>'


def test_dangerous_attributes_dropped():
    assert sanitize('<a href="javascript:alert(1)">x</a>') == "<a>x</a>"
    assert "onclick" not in sanitize('<b onclick="x()">hi</b>')


def test_comments_and_stray_brackets():
    assert sanitize("<p>a<!-- c --></p>") == "<p>a</p>"
    assert sanitize("1 < 2") == "1 &lt; 2"


@pytest.mark.parametrize("bad", [None, 42, ["<b>"]])
def test_non_string_rejected(bad):
    with pytest.raises(MalformedInput):
        sanitize(bad)
