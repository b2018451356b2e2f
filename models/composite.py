"""Parsers for two-part action values.

Rename, move and copy actions carry ``from:<src>;to:<dst>``. The
set-file-contents action carries ``<path>;<content>``, split on the first
";" only so the content may contain the delimiter. Both parsers return None
for a malformed value.
"""

import re
from typing import Optional

COMPOSITE_DELIMITER = ";"

_FROM_TO_PREFIX = re.compile(r"^(from:|to:)")
_PATH_PREFIX = "path:"
_CONTENT_PREFIX = "content:"


def parse_from_to_value(value: str) -> Optional[tuple[str, str]]:
    """Parse ``from:<src>;to:<dst>`` into a (source, destination) pair.

    The ``from:``/``to:`` prefixes are optional. Any split that does not
    yield exactly two parts is malformed.

    Examples:
        - "from:a.md;to:b.md" -> ("a.md", "b.md")
        - "a.md;b.md" -> ("a.md", "b.md")
        - "a.md" -> None
    """
    parts = value.split(COMPOSITE_DELIMITER)
    if len(parts) != 2:
        return None
    source, destination = (_FROM_TO_PREFIX.sub("", part) for part in parts)
    return source, destination


def parse_file_contents_value(value: str) -> Optional[tuple[str, str]]:
    """Parse ``<path>;<content>`` into a (path, content) pair.

    Optional ``path:`` and ``content:`` prefixes are stripped.

    Examples:
        - "src/a.ts;hello" -> ("src/a.ts", "hello")
        - "path:a.ts;content:x;y" -> ("a.ts", "x;y")
        - "a.ts" -> None
    """
    if COMPOSITE_DELIMITER not in value:
        return None
    path, content = value.split(COMPOSITE_DELIMITER, 1)
    if path.startswith(_PATH_PREFIX):
        path = path[len(_PATH_PREFIX):]
    if content.startswith(_CONTENT_PREFIX):
        content = content[len(_CONTENT_PREFIX):]
    return path, content
