"""
Name: Domain Value Objects

Responsibilities:
  - Define the separator presets and the SeparatorConfig value
  - Keep the human-readable preset name and its pattern in sync
  - Hold the fixed on-disk marker grammar (anchor sigil, comment, fence, link)

Collaborators:
  - config.py: persists the selected SeparatorConfig
  - infrastructure.text: consumes patterns and markers

Constraints:
  - Pure values, no I/O
  - Marker strings are part of the document format and must stay bit-exact
"""

from dataclasses import dataclass
from typing import Dict

# R: Marker grammar embedded in documents
ANCHOR_SIGIL = "^"
COMMENT_MARKER = "%%COMMENT%%"
QUOTE_PREFIX = ">"
FENCE = "---"

# R: Separator presets (name -> regex pattern)
EMPTY_LINE = "empty line"
HORIZONTAL_RULE = "---"

SEPARATOR_PRESETS: Dict[str, str] = {
    EMPTY_LINE: r"\n{2,}",
    HORIZONTAL_RULE: r"\n+---\s*(?:\n+|\n*?)",
}

DEFAULT_SEPARATOR_NAME = EMPTY_LINE


@dataclass(frozen=True)
class SeparatorConfig:
    """
    R: Active separator: preset name plus the pattern it maps to.

    Build it with `from_name` so name and pattern cannot drift apart.
    """

    name: str
    pattern: str

    @classmethod
    def from_name(cls, name: str) -> "SeparatorConfig":
        if name not in SEPARATOR_PRESETS:
            known = ", ".join(repr(n) for n in SEPARATOR_PRESETS)
            raise ValueError(f"Unknown separator preset {name!r} (expected one of {known})")
        return cls(name=name, pattern=SEPARATOR_PRESETS[name])

    @classmethod
    def default(cls) -> "SeparatorConfig":
        return cls.from_name(DEFAULT_SEPARATOR_NAME)


def anchor_marker(token: str) -> str:
    """R: Marker line text for an anchor token (`^<token>`)."""
    return ANCHOR_SIGIL + token


def embed_link(source_base_name: str, token: str) -> str:
    """R: Embed reference to an anchored block (`![[<base>#^<token>]]`)."""
    return f"![[{source_base_name}#{ANCHOR_SIGIL}{token}]]"
