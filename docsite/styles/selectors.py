"""Identifier escaping for generated class selectors."""

from __future__ import annotations


def escape_class_name(name: str) -> str:
    r"""Escape ``name`` for use as a CSS class selector.

    Follows the CSSOM ``CSS.escape`` algorithm, so separators and other
    reserved characters in utility names stay valid inside selectors.

    Examples
    --------
    >>> escape_class_name("current:foo")
    'current\\:foo'
    >>> escape_class_name("w-1/2")
    'w-1\\/2'
    >>> escape_class_name("2xl")
    '\\32 xl'
    """
    escaped: list[str] = []
    for index, char in enumerate(name):
        code = ord(char)
        is_digit = "0" <= char <= "9"
        if code == 0:
            escaped.append("\ufffd")
        elif (
            0x01 <= code <= 0x1F
            or code == 0x7F
            or (index == 0 and is_digit)
            or (index == 1 and is_digit and name[0] == "-")
        ):
            escaped.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and len(name) == 1:
            escaped.append("\\-")
        elif (
            code >= 0x80
            or char in "-_"
            or is_digit
            or (char.isascii() and char.isalpha())
        ):
            escaped.append(char)
        else:
            escaped.append(f"\\{char}")
    return "".join(escaped)


def class_selector(name: str) -> str:
    """Return the ``.class`` selector for an unescaped class name."""
    return f".{escape_class_name(name)}"


__all__ = ["class_selector", "escape_class_name"]
