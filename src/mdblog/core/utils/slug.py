"""Heading anchor ids, following the GitHub heading-id scheme"""

import re


# Anything that is not a word character (letters, digits, underscore),
# a hyphen or a plain space is dropped.
_STRIP_RE = re.compile(r'[^\w\- ]')


def slugify(text: str) -> str:
    """Lowercase, drop punctuation, turn each space into a hyphen.

    Underscores survive and runs of hyphens are not collapsed, so
    'foo_bar' stays 'foo_bar' and 'a -- b' becomes 'a----b'.
    """
    return _STRIP_RE.sub('', text.lower()).replace(' ', '-')


class HeadingSlugger:
    """Hands out unique anchor ids for one rendered document.

    A repeated slug gets '-1', '-2', ... appended, skipping any suffix
    already taken by an earlier heading.
    """

    def __init__(self):
        self._occurrences: dict[str, int] = {}

    def slug(self, text: str) -> str:
        original = slugify(text)
        result = original
        while result in self._occurrences:
            self._occurrences[original] += 1
            result = f"{original}-{self._occurrences[original]}"
        self._occurrences[result] = 0
        return result
