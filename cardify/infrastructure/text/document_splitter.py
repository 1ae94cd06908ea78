"""
Name: Document Splitter

Responsibilities:
  - Separate the leading metadata fence (frontmatter) from the body
  - Keep the header verbatim so header + body rebuilds the input

Collaborators:
  - domain.entities.Document

Constraints:
  - Never raises: a missing header is the common case, not a failure
  - Only a fence at the very start of the text counts

Notes:
  - The closing fence is the first `---` after the opening line; it may
    sit directly after content on the same line ("key: v---")
"""

import re

from ...domain.entities import Document

# R: Opening fence line, then the shortest span up to the closing fence
_HEADER_RE = re.compile(r"\A(---\s*\n.*?\n?---)", re.DOTALL)


def split_document(raw_text: str) -> Document:
    """
    R: Split raw markdown into (header, body).

    Args:
        raw_text: Full document text

    Returns:
        Document with header ("" if absent) and the remaining body
    """
    match = _HEADER_RE.match(raw_text)
    if not match:
        return Document(header="", body=raw_text)

    header = match.group(1)
    return Document(header=header, body=raw_text[len(header):])
