"""Merge engine for incremental project.md updates.

Reconciles an existing (possibly user-edited) project.md with a freshly
rendered one:
- auto-update sections are refreshed from the fresh document, keeping a
  user-written Project Overview description
- static sections are regenerated verbatim
- everything else is preserved as written
- sections the existing file lacks are appended
A change-log block is inserted under the document title.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from ...models import SectionMergeStrategy
from ..core.document import MergeChange, ParsedSection
from .headings import DESCRIPTION_FIELD, PROJECT_OVERVIEW_HEADING
from .sections import (
    classify_section,
    extract_section_name,
    find_section,
    normalize_header,
    parse_sections,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"^\[TODO", re.IGNORECASE)

UPDATED_DESCRIPTION = "Updated with fresh scan data"
OVERVIEW_UPDATED_DESCRIPTION = "Updated name/type from fresh scan"
NEW_SECTION_DESCRIPTION = "New section added from template"


@dataclass
class MergeResult:
    """Merged document text and the changes that produced it."""

    text: str
    changes: list[MergeChange] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.changes)


def is_placeholder(value: str | None) -> bool:
    """Whether a field value is missing or an unfilled ``[TODO...]`` marker."""
    return not value or _PLACEHOLDER_RE.match(value) is not None


def _extract_field_value(lines: list[str], prefix: str) -> str | None:
    for line in lines:
        stripped = line.lstrip()
        if stripped.startswith(prefix):
            return stripped[len(prefix) :].strip()
    return None


def _remove_field(lines: list[str], prefix: str) -> list[str]:
    return [line for line in lines if not line.lstrip().startswith(prefix)]


def _merge_project_overview(
    existing: ParsedSection,
    fresh: ParsedSection,
    changes: list[MergeChange],
) -> str:
    """Take fresh overview fields but keep a user-written description."""
    existing_lines = existing.content.split("\n")
    fresh_lines = fresh.content.split("\n")

    user_description = _extract_field_value(existing_lines, DESCRIPTION_FIELD)
    result_lines = list(fresh_lines)

    if not is_placeholder(user_description):
        for i, line in enumerate(result_lines):
            if line.lstrip().startswith(DESCRIPTION_FIELD):
                result_lines[i] = f"{DESCRIPTION_FIELD} {user_description}"
                break

    existing_rest = "\n".join(_remove_field(existing_lines, DESCRIPTION_FIELD)).strip()
    fresh_rest = "\n".join(_remove_field(fresh_lines, DESCRIPTION_FIELD)).strip()
    if existing_rest != fresh_rest:
        changes.append(
            MergeChange(
                section=extract_section_name(PROJECT_OVERVIEW_HEADING),
                description=OVERVIEW_UPDATED_DESCRIPTION,
            )
        )

    return fresh.header + "\n" + "\n".join(result_lines)


def merge_auto_update_section(
    existing: ParsedSection,
    fresh: ParsedSection,
    changes: list[MergeChange],
) -> str:
    """Merge one auto-update section with its fresh counterpart.

    Args:
        existing: Section from the user's file
        fresh: Matching section from the fresh rendering
        changes: Change list, appended to when content differs

    Returns:
        Rendered section (header + content)
    """
    existing_full = existing.render()
    fresh_full = fresh.render()

    if existing_full.strip() == fresh_full.strip():
        return existing_full

    if normalize_header(existing.header).startswith(PROJECT_OVERVIEW_HEADING.lower()):
        return _merge_project_overview(existing, fresh, changes)

    changes.append(
        MergeChange(
            section=extract_section_name(existing.header),
            description=UPDATED_DESCRIPTION,
        )
    )
    return fresh_full


def format_change_log(changes: list[MergeChange], scanned_on: date | None = None) -> str:
    """Format the change-log blockquote inserted into a merged project.md."""
    scanned = (scanned_on or datetime.now(UTC).date()).isoformat()

    if not changes:
        return "\n".join(
            [
                "> **✅ Re-analyzed by `analyze_project`** (no changes detected)",
                f"> **Scanned:** {scanned}",
            ]
        )

    lines = [
        "> **🔄 Updated by `analyze_project`** (incremental update)",
        f"> **Scanned:** {scanned}",
        "> **Changes detected:**",
    ]
    lines.extend(f"> - {change.section}: {change.description}" for change in changes)
    return "\n".join(lines)


def _find_title_line(lines: list[str]) -> int | None:
    """Index of the first ``# `` title line outside code fences."""
    in_fence = False
    for i, line in enumerate(lines):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            continue
        if not in_fence and line.startswith("# "):
            return i
    return None


def insert_change_log(body: str, change_log: str) -> str:
    """Place the change log right after the title line, or at the top."""
    lines = body.split("\n")
    title_index = _find_title_line(lines)

    if title_index is not None:
        lines[title_index + 1 : title_index + 1] = ["", change_log]
        return "\n".join(lines)

    return change_log + "\n" + body


def merge_sections(
    existing_sections: list[ParsedSection],
    fresh_text: str,
    scanned_on: date | None = None,
) -> MergeResult:
    """Merge parsed existing sections with a freshly rendered document.

    Never raises: unmatched auto-update or static sections keep their
    existing content.

    Args:
        existing_sections: Sections parsed from the existing project.md
        fresh_text: Complete freshly rendered project.md
        scanned_on: Date shown in the change log (defaults to today, UTC)

    Returns:
        MergeResult with the merged text and recorded changes
    """
    fresh_sections = parse_sections(fresh_text)
    changes: list[MergeChange] = []
    consumed: set[str] = set()
    merged_parts: list[str] = []

    for existing in existing_sections:
        strategy = classify_section(existing.header)
        fresh = find_section(existing.header, fresh_sections)
        if fresh is not None:
            consumed.add(normalize_header(fresh.header))

        if strategy is SectionMergeStrategy.AUTO_UPDATE and fresh is not None:
            merged_parts.append(merge_auto_update_section(existing, fresh, changes))
        elif strategy is SectionMergeStrategy.STATIC and fresh is not None:
            merged_parts.append(fresh.render())
        else:
            merged_parts.append(existing.render())

    for fresh in fresh_sections:
        if fresh.is_preamble or normalize_header(fresh.header) in consumed:
            continue
        changes.append(
            MergeChange(
                section=extract_section_name(fresh.header),
                description=NEW_SECTION_DESCRIPTION,
            )
        )
        merged_parts.append(fresh.render())

    body = "\n".join(merged_parts)
    text = insert_change_log(body, format_change_log(changes, scanned_on))

    logger.debug(f"Merged project.md: {len(changes)} change(s)")
    return MergeResult(text=text, changes=changes)


def merge_project_md(
    existing_text: str | None,
    fresh_text: str,
    scanned_on: date | None = None,
) -> MergeResult:
    """Merge an existing project.md (if any) with a fresh rendering.

    A missing or whitespace-only existing document skips the merge and
    returns the fresh document unmodified with no changes.
    """
    if not existing_text or not existing_text.strip():
        return MergeResult(text=fresh_text)
    return merge_sections(parse_sections(existing_text), fresh_text, scanned_on)
