import re
from typing import Any

_ESCAPES = {"\r": "%0D", "\n": "%0A", '"': "%22"}
_ESCAPE_RE = re.compile(r'[\r\n"]')

# A CRLF pair is matched first, so a lone CR or LF is never half of a pair.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def escape_name(name: Any) -> str:
    """Percent-encode CR, LF and double quotes so the name fits in a quoted header parameter."""
    return _ESCAPE_RE.sub(lambda match: _ESCAPES[match.group()], str(name))


def normalize_value(value: Any) -> str:
    """Coerce a field value to `str` and turn every line break into CRLF.

    Ref.: https://html.spec.whatwg.org/multipage/form-control-infrastructure.html#multipart/form-data-encoding-algorithm
    """
    return _LINE_BREAK_RE.sub("\r\n", str(value))
