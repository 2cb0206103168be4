"""
Text helpers for deriving query method names from filter identifiers.
"""

import re

# Separators between words in a filter identifier
WORD_SEPARATORS = re.compile(r"[ _\-]+")


def camel(value):
    """
    Convert an identifier to camelCase.

    Hyphens, underscores and spaces separate words. Inner capitals of a
    word are kept, so identifiers that are already camelCase pass through.

    Args:
        value (str): Identifier to convert (e.g., "created_at")

    Returns:
        str: camelCased identifier (e.g., "createdAt")
    """
    words = [word for word in WORD_SEPARATORS.split(str(value)) if word]
    if not words:
        return ""

    studly = "".join(word[0].upper() + word[1:] for word in words)
    return studly[0].lower() + studly[1:]
