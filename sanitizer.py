# sanitizer.py
# ------------------------------------------------------------
# Allow-list HTML cleaning for user-supplied post content.
# ------------------------------------------------------------
import bleach

from errors import MalformedInput

ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "em",
    "i", "li", "ol", "p", "pre", "strong", "ul",
})
ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


def sanitize(raw: str) -> str:
    """
    Clean untrusted text before it is stored for later HTML rendering.

    - Tags outside ALLOWED_TAGS are removed (strip=True), not escaped
      and kept, so <script>alert(1)</script> becomes "alert(1)".
    - Attributes outside ALLOWED_ATTRIBUTES are dropped, which takes
      out every on* event handler.
    - href values using other schemes (javascript:, data:) are dropped.
    - HTML comments are removed.

    The output is stable under a second pass: sanitize(sanitize(x))
    equals sanitize(x).
    """
    if not isinstance(raw, str):
        raise MalformedInput("content must be a string")
    return bleach.clean(
        raw,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
