"""Formatted-message composer.

Renders a plain-text pattern and its arguments as plain text or HTML. The
pattern understands three markers, each consuming at most one argument:

    %q   the next argument as *quoted* text. HTML: the escaped text inside
         ``«<span class="q">…</span>»``. Plain: the raw text inside double
         quotes.
    %s   the next argument verbatim (assumed to be in the target format).
    %%   a literal percent sign.

Any other ``%x`` marker renders as nothing and consumes no argument (or
raises `MessageFormatError` when ``strict=True``).

Leading spaces of the pattern are rendered as ``&nbsp;`` in HTML so that
indentation survives. The first character that is not a space, including a
marker, ends the leading run for the rest of the pattern.

Example:
    ```py
    >>> format_plain("error in %q at line %s", "file.txt", 42)
    'error in "file.txt" at line 42'
    >>> format_html("bad value %q", "<x>")
    'bad value «<span class="q">&#60;x&#62;</span>»'
    ```
"""

from .errors import MessageFormatError
from .extensions import get_extension

NBSP = "&nbsp;"
QUOTE_OPEN_HTML = '«<span class="q">'
QUOTE_CLOSE_HTML = "</span>»"
HTML_META_CHARACTERS = frozenset('<>&"')


def construct_message(
    use_html: bool, pattern: str, *args: object, strict: bool = False
) -> str:
    """Render ``pattern`` with ``args`` as HTML or plain text.

    Args:
        use_html: Render HTML when True, plain text otherwise.
        pattern: Plain-text pattern containing ``%q``, ``%s`` and ``%%`` markers.
        *args: Arguments consumed in order by ``%q`` and ``%s``.
        strict: Raise on unrecognised markers instead of ignoring them.

    Returns:
        str: The rendered message.

    Raises:
        MessageFormatError: If the pattern ends with a lone ``%``, uses more
            arguments than supplied, or (with ``strict``) contains an unknown
            marker.
    """
    parts: list[str] = []
    next_arg = 0
    leading_space = True
    i = 0
    length = len(pattern)

    def take_arg(position: int) -> str:
        nonlocal next_arg
        if next_arg >= len(args):
            raise MessageFormatError(pattern, position, "missing argument")
        value = args[next_arg]
        next_arg += 1
        return text_of(value)

    while i < length:
        ch = pattern[i]
        i += 1
        if ch == "%":
            leading_space = False
            if i >= length:
                raise MessageFormatError(pattern, i - 1, "dangling '%'")
            marker = pattern[i]
            i += 1
            match marker:
                case "q":
                    quote = take_arg(i - 2)
                    if use_html:
                        parts.append(QUOTE_OPEN_HTML)
                        parts.append(encode_html(quote))
                        parts.append(QUOTE_CLOSE_HTML)
                    else:
                        parts.append(f'"{quote}"')
                case "s":
                    parts.append(take_arg(i - 2))
                case "%":
                    parts.append("%")
                case _:
                    if strict:
                        raise MessageFormatError(
                            pattern, i - 2, f"unknown marker '%{marker}'"
                        )
        elif ch == " " and leading_space:
            parts.append(NBSP if use_html else ch)
        else:
            leading_space = False
            parts.append(_encode_html_char(ch) if use_html else ch)

    return "".join(parts)


def format_plain(pattern: str, *args: object) -> str:
    """Render ``pattern`` as plain text."""
    return construct_message(False, pattern, *args)


def format_html(pattern: str, *args: object) -> str:
    """Render ``pattern`` as HTML."""
    return construct_message(True, pattern, *args)


def text_of(o: object) -> str:
    """Return the display text of a message argument.

    A ``str`` extension takes precedence (see `get_extension`), then the
    object's ``str()`` form. None renders as the empty string.
    """
    if o is None:
        return ""
    if (s := get_extension(o, str)) is not None:
        return s
    return str(o)


def encode_html(s: str) -> str:
    """Escape plain text for HTML, preserving leading spaces as ``&nbsp;``."""
    parts: list[str] = []
    leading_space = True
    for ch in s:
        if leading_space:
            if ch == " ":
                parts.append(NBSP)
                continue
            leading_space = False
        parts.append(_encode_html_char(ch))
    return "".join(parts)


def _encode_html_char(ch: str) -> str:
    code = ord(ch)
    if ch in HTML_META_CHARACTERS:
        return f"&#{code};"
    if ch in "\n\r":
        return "\n"
    if code < 32 or code >= 128:
        return f"&#{code};"
    return ch
