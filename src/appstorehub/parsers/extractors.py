"""Best-effort pattern extraction over documents we do not control.

Regex extraction against raw markup breaks whenever the storefront changes.
Call sites depend only on ``first``/``all`` so a pattern can be replaced
without touching them.
"""

import re
from typing import List, Optional, Pattern, Union


class PatternExtractor:
    """Extracts the first capture group of a regex from raw text."""

    def __init__(self, pattern: Union[str, Pattern[str]], flags: int = 0):
        self.pattern = re.compile(pattern, flags) if isinstance(pattern, str) else pattern

    def first(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match or not match.group(1):
            return None
        return match.group(1)

    def all(self, text: str) -> List[str]:
        return [m.group(1) for m in self.pattern.finditer(text)]

    def __repr__(self) -> str:
        return f"PatternExtractor({self.pattern.pattern!r})"


# URL-encoded {"token":"..."} embedded in the storefront page
TOKEN_EXTRACTOR = PatternExtractor(r"token%22%3A%22([^%]+)%22%7D")

# <dict><key>string</key><string>VALUE</string> rows of the hints plist
SUGGESTION_EXTRACTOR = PatternExtractor(r"<dict>\s*<key>string</key>\s*<string>([^<]+)</string>")

# "customersAlsoBoughtApps":["123","456"] inside the app page
SIMILAR_APPS_EXTRACTOR = PatternExtractor(r"customersAlsoBoughtApps\":(.*?\])")
