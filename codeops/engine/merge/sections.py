"""Section parser and classifier for project.md documents.

Only level-2 (``##``) headings split sections; deeper headings stay inside
their parent section. Content before the first ``##`` heading becomes a
preamble section with an empty header and level 0.
"""

import re

from ...models import SectionMergeStrategy
from ..core.document import ParsedSection
from .headings import AUTO_UPDATE_SECTIONS, STATIC_SECTIONS

_LEVEL2_HEADER_RE = re.compile(r"^#{2}\s+.+$")
_LEADING_HASHES_RE = re.compile(r"^#+\s*")
# Emoji and pictographs, dingbats and misc symbols, variation selectors
_DECORATIVE_RE = re.compile("[\U0001F300-\U0001F9FF\u2600-\u27BF\uFE0F]")


def parse_sections(content: str) -> list[ParsedSection]:
    """Split a markdown document into level-2 sections in document order.

    Joining ``section.render()`` for every section with ``"\\n"``
    reproduces the input exactly.

    Args:
        content: Raw markdown text

    Returns:
        Parsed sections; a document without ``##`` headings yields a single
        preamble section holding the whole text.
    """
    if not isinstance(content, str):
        content = ""

    sections: list[ParsedSection] = []

    def flush() -> None:
        if current_header or current_lines:
            sections.append(
                ParsedSection(
                    current_header,
                    current_level,
                    "\n".join(current_lines),
                    heading_only=bool(current_header) and not current_lines,
                )
            )

    current_header = ""
    current_level = 0
    current_lines: list[str] = []

    for line in content.split("\n"):
        if _LEVEL2_HEADER_RE.match(line):
            flush()
            current_header = line
            current_level = 2
            current_lines = []
        else:
            current_lines.append(line)

    flush()

    return sections


def render_sections(sections: list[ParsedSection]) -> str:
    """Reassemble parsed sections into markdown."""
    return "\n".join(section.render() for section in sections)


def classify_section(header: str) -> SectionMergeStrategy:
    """Determine how a section is handled during merge.

    Matching is a case-insensitive prefix match on the trimmed heading.
    Empty headings (the preamble) and unknown headings are preserved so
    user content is never lost.

    Args:
        header: The full heading line (e.g. "## Toolchain")

    Returns:
        The merge strategy to apply
    """
    if not isinstance(header, str):
        return SectionMergeStrategy.PRESERVE

    normalized = header.strip().lower()
    if not normalized:
        return SectionMergeStrategy.PRESERVE

    if any(normalized.startswith(h.lower()) for h in AUTO_UPDATE_SECTIONS):
        return SectionMergeStrategy.AUTO_UPDATE

    if any(normalized.startswith(h.lower()) for h in STATIC_SECTIONS):
        return SectionMergeStrategy.STATIC

    return SectionMergeStrategy.PRESERVE


def normalize_header(header: str) -> str:
    return header.strip().lower()


def extract_section_name(header: str) -> str:
    """Human-readable section name from a heading line.

    "## 🚨 MANDATORY: Load CodeOps Rules" -> "MANDATORY: Load CodeOps Rules"
    """
    name = _LEADING_HASHES_RE.sub("", header)
    return _DECORATIVE_RE.sub("", name).strip()


def find_section(header: str, sections: list[ParsedSection]) -> ParsedSection | None:
    """Find the section whose heading matches ``header`` case-insensitively."""
    wanted = normalize_header(header)
    for section in sections:
        if normalize_header(section.header) == wanted:
            return section
    return None
