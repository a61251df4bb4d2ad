"""Detection of self-identifying facts in user text.

Hides the recognition policy: which phrasings count as a name, in what
priority they are tried, and when a detected value replaces a stored one.
"""

import re
from dataclasses import dataclass

from .models import ExtractedFact, UserProfile

# 2-30 letters, hyphens or apostrophes. Letters include non-ASCII ones.
_NAME = r"(?P<value>(?:[^\W\d_]|['-]){2,30})"


@dataclass(frozen=True)
class NamePattern:
    """A labelled phrasing that introduces the user's name."""

    label: str
    regex: re.Pattern[str]

    def match(self, text: str) -> str | None:
        found = self.regex.search(text)
        if found is None:
            return None
        return found.group("value").strip()


def _pattern(label: str, lead: str) -> NamePattern:
    return NamePattern(label, re.compile(rf"\b{lead}\s+{_NAME}", re.IGNORECASE))


# Tried in order; the first match wins.
DEFAULT_NAME_PATTERNS: tuple[NamePattern, ...] = (
    _pattern("my name is", r"my\s+name\s+is"),
    _pattern("i'm", r"i['’]?m"),
    _pattern("i am", r"i\s+am"),
    _pattern("call me", r"call\s+me"),
)


class ProfileExtractor:
    """Scans user text for a name and keeps the session profile current.

    Example:
        >>> extractor = ProfileExtractor()
        >>> profile = UserProfile()
        >>> extractor.update(profile, "hi, my name is Anna").value
        'Anna'
        >>> extractor.update(profile, "call me ANNA") is None
        True
    """

    def __init__(self, patterns: tuple[NamePattern, ...] = DEFAULT_NAME_PATTERNS):
        self._patterns = patterns

    @property
    def patterns(self) -> tuple[NamePattern, ...]:
        return self._patterns

    def extract(self, text: str) -> ExtractedFact | None:
        """Return the name introduced in ``text``, if any.

        No attempt is made to reconcile several phrasings in one input.
        """
        for pattern in self._patterns:
            value = pattern.match(text)
            if value:
                return ExtractedFact(field="name", value=value, pattern=pattern.label)
        return None

    def update(self, profile: UserProfile, text: str) -> ExtractedFact | None:
        """Apply a detected name to ``profile``.

        Returns:
            The fact when the profile changed (the caller acknowledges it),
            None when nothing was detected or the name is already known
            under a different case.
        """
        fact = self.extract(text)
        if fact is None:
            return None
        current = profile.name
        if current is not None and current.casefold() == fact.value.casefold():
            return None
        profile.name = fact.value
        return fact
