"""Keywords are strings carrying a reserved prefix.

`:name` reads as KEYWORD_PREFIX + "name" and prints back as `:name`. The
prefix character encodes to two bytes in UTF-8 and is reserved by convention
only: a string literal that starts with it, such as "ʞx", also prints as `:x`.
"""

KEYWORD_PREFIX = "ʞ"


def keyword(name: str) -> str:
    return KEYWORD_PREFIX + name


def is_keyword(value: object) -> bool:
    return isinstance(value, str) and value.startswith(KEYWORD_PREFIX)


def keyword_name(value: str) -> str:
    return value[len(KEYWORD_PREFIX):]
