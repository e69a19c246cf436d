"""Section merge engine for project.md.

- headings: shared heading -> strategy table
- sections: level-2 section parser and classifier
- merge_engine: reconciliation of existing and fresh documents
- template: fresh project.md rendering from a ProjectAnalysis
"""

from .headings import (
    AUTO_UPDATE_SECTIONS,
    DESCRIPTION_FIELD,
    SECTION_STRATEGIES,
    STATIC_SECTIONS,
)
from .merge_engine import (
    MergeResult,
    format_change_log,
    insert_change_log,
    is_placeholder,
    merge_auto_update_section,
    merge_project_md,
    merge_sections,
)
from .sections import (
    classify_section,
    extract_section_name,
    find_section,
    parse_sections,
    render_sections,
)
from .template import format_project_md

__all__ = [
    # Headings
    "AUTO_UPDATE_SECTIONS",
    "DESCRIPTION_FIELD",
    "SECTION_STRATEGIES",
    "STATIC_SECTIONS",
    # Parser / classifier
    "classify_section",
    "extract_section_name",
    "find_section",
    "parse_sections",
    "render_sections",
    # Merge
    "MergeResult",
    "format_change_log",
    "insert_change_log",
    "is_placeholder",
    "merge_auto_update_section",
    "merge_project_md",
    "merge_sections",
    # Template
    "format_project_md",
]
