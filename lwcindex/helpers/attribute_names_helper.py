"""
Attribute name helpers.

Component properties are declared in camelCase (``iconName``) while markup
uses the kebab-case attribute (``icon-name``).
"""

from __future__ import annotations


def _starts_word(ch: str) -> bool:
    return ch.isascii() and ch.isupper()


def split_words(name: str) -> list[str]:
    """
    Split an identifier into words. Every ASCII capital after position 0 starts a new word.

    Examples:
        >>> split_words("fooBarBaz")
        ['foo', 'Bar', 'Baz']
        >>> split_words("Foo")
        ['Foo']
        >>> split_words("iconURL")
        ['icon', 'U', 'R', 'L']
    """
    words: list[str] = []
    start = 0
    for i, ch in enumerate(name):
        if i > 0 and _starts_word(ch):
            words.append(name[start:i])
            start = i
    if name:
        words.append(name[start:])
    return words


def to_kebab_case(name: str) -> str:
    """
    Convert a camelCase property name to its kebab-case attribute name.

    The first word is kept as is, so a leading capital never produces a
    leading hyphen. Each following word has its capital lowercased.

    Args:
        name: Property name as declared (e.g. "iconName")

    Returns:
        Attribute name (e.g. "icon-name")
    """
    words = split_words(name)
    if not words:
        return name
    head, rest = words[0], words[1:]
    return "-".join([head, *(w[0].lower() + w[1:] for w in rest)])
