"""Codepoint-wise string reversal."""


def reverse(text: str) -> str:
    """Reverse a string codepoint by codepoint.

    Python strings are already sequences of codepoints, so multi-byte
    characters (e.g. CJK or emoji) move as whole units and are never split
    at the byte level. Combining marks are not kept with their base
    character.

    Args:
        text: The string to reverse

    Returns:
        A new string with the codepoints of ``text`` in opposite order

    Raises:
        TypeError: If ``text`` is not a ``str``

    Examples:
        >>> reverse("Hello, 世界")
        '界世 ,olleH'
        >>> reverse("")
        ''
    """
    if not isinstance(text, str):
        raise TypeError(f"reverse() expects str, got {type(text).__name__}")

    codepoints = list(text)
    n = len(codepoints)
    out = [""] * n
    for i, c in enumerate(codepoints):
        out[n - 1 - i] = c
    return "".join(out)
