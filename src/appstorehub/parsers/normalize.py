"""Field adapters shared by every parser.

Each upstream source encodes the same facts a little differently (singletons
where a list is expected, prices as strings, identity buried in a profile
URL). These helpers fold those quirks into the canonical entity fields.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

ICON_FALLBACK_CHAIN = ("artworkUrl512", "artworkUrl100", "artworkUrl60")

_NON_WORD_RE = re.compile(r"[^A-Za-z0-9]+")


def ensure_list(value: Any) -> List[Any]:
    """Coerce ``None`` to ``[]`` and a single object to a one-element list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def pick_icon(entry: Dict[str, Any]) -> str:
    """Highest resolution artwork URL available, or an empty string."""
    for key in ICON_FALLBACK_CHAIN:
        if entry.get(key):
            return entry[key]
    return ""


def is_free(price: Optional[float]) -> bool:
    return price == 0


def label(node: Optional[Dict[str, Any]], default: Optional[str] = None) -> Optional[str]:
    """Read the ``label`` of an RSS-as-JSON node that may be missing."""
    if not node:
        return default
    return node.get("label", default)


def attribute(node: Optional[Dict[str, Any]], name: str, default: Optional[str] = None) -> Optional[str]:
    if not node:
        return default
    return (node.get("attributes") or {}).get(name, default)


def parse_link(link: Any, rel: str = "alternate") -> Optional[str]:
    """Return the href of the link with the given ``rel``.

    ``link`` may be a single link object or a list of them.
    """
    for candidate in ensure_list(link):
        attrs = candidate.get("attributes") or {}
        if attrs.get("rel") == rel:
            return attrs.get("href")
    return None


def parse_developer_link(href: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split an artist profile href into ``(developer_url, developer_id)``.

    The id is only derived for ``.../id<digits>?mt=8`` style links.
    """
    if not href:
        return None, None
    if "/id" not in href:
        return href, None
    developer_id = href.split("/id")[1].split("?mt")[0]
    return href, developer_id


def to_identifier(text: str) -> str:
    """``"Data Used to Track You"`` -> ``"DATA_USED_TO_TRACK_YOU"``."""
    return _NON_WORD_RE.sub("_", text).strip("_").upper()
