"""Name normalization for fuzzy comparison.

Case-folds, replaces anything that isn't a Unicode letter or digit with a
space, and collapses whitespace. Total: never raises.
"""

import re

# \w is letters, digits and underscore; underscore counts as punctuation here
_NON_ALNUM = re.compile(r'[\W_]+')


def normalize(name) -> str:
    if not name:
        return ""
    return _NON_ALNUM.sub(' ', str(name).casefold()).strip()


def tokenize(name) -> list[str]:
    """Whitespace tokens of the normalized name, empty list for empty input."""
    return normalize(name).split()


def reverse_tokens(name) -> str:
    """Re-join the tokens of name in reverse order ("Last First" form)."""
    return " ".join(reversed(tokenize(name)))
