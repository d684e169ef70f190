"""Turn page content into ordered :class:`RawFragment` sequences.

The engine only needs text in traversal order; how the page was obtained
(live browser, cached HTML, fixture file) is the caller's business.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

from harvest.records import RawFragment

logger = logging.getLogger(__name__)

# Tags whose text never reaches the rendered page
_INVISIBLE_TAGS = frozenset({"script", "style", "noscript", "template", "head"})

# Blocks in a plain-text dump are separated by one or more blank lines
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")


def fragments_from_lines(texts: Iterable[str]) -> list[RawFragment]:
    """Wrap plain strings, numbering them in the order given.

    Surrounding whitespace is trimmed; strings that are empty afterwards are
    skipped without consuming a position.
    """
    fragments: list[RawFragment] = []
    for text in texts:
        text = text.strip()
        if text:
            fragments.append(RawFragment(text=text, position=len(fragments)))
    return fragments


def fragments_from_text(raw: str) -> list[RawFragment]:
    """Split a text dump into blank-line separated blocks."""
    return fragments_from_lines(_BLOCK_SPLIT_RE.split(raw))


def fragments_from_html(html: str) -> list[RawFragment]:
    """Flatten *html* into one fragment per element, in document order.

    Each fragment is the element's visible text with child blocks on their
    own lines, approximating a browser's ``innerText``.  Nested elements
    produce overlapping fragments; deduplication takes care of repeats.
    """
    soup = BeautifulSoup(html, "html.parser")
    for hidden in soup.find_all(list(_INVISIBLE_TAGS)):
        # Nested hidden tags (a <style> inside <head>) go with their parent
        if not hidden.decomposed:
            hidden.decompose()

    texts: list[str] = []
    for element in soup.find_all(True):
        if not isinstance(element, Tag):
            continue
        text = element.get_text(separator="\n", strip=True)
        if text:
            texts.append(text)

    fragments = fragments_from_lines(texts)
    logger.debug("Flattened HTML into %d fragments", len(fragments))
    return fragments
