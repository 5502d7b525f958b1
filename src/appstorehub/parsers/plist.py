"""Search hints plist fragment -> Suggestion records."""

import html
from typing import List

from ..core.models import Suggestion
from .extractors import SUGGESTION_EXTRACTOR, PatternExtractor


def parse_suggestions(text: str, extractor: PatternExtractor = SUGGESTION_EXTRACTOR) -> List[Suggestion]:
    """Pull every suggested term out of the hints response.

    Only the narrow ``<dict><key>string</key><string>VALUE</string>`` shape
    the hints endpoint emits is recognised; no XML tree is built.
    """
    return [Suggestion(term=html.unescape(value)) for value in extractor.all(text)]
