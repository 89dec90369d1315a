"""
Naming utilities for vtag.
"""


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _lower(char: str) -> str:
    if _is_upper(char):
        return chr(ord(char) - ord("A") + ord("a"))
    return char


def to_underscore_case(name: str) -> str:
    """
    Convert ``MixedCase`` identifiers to ``underscore_case``.

    The conversion walks the name one character at a time, remembering the
    previous raw character and the last character written. A run of capitals
    is kept together (``"DD" -> "dd"``, ``"HTTPServer" -> "http_server"``)
    and an underscore is never written twice in a row. Only ASCII letters
    are case-folded; anything else is copied through unchanged.
    """
    if not name:
        return name

    parts: list[str] = []
    last = name[0]
    last_written = ""
    for idx, char in enumerate(name[1:], start=1):
        if _is_lower(char) and _is_upper(last) and idx != 1 and last_written != "_":
            parts.append("_")
        parts.append(_lower(last))
        last_written = last
        if _is_lower(last) and _is_upper(char):
            parts.append("_")
            last_written = "_"
        last = char
    parts.append(_lower(last))
    return "".join(parts)
