"""Section headings of the generated project.md and their merge strategies.

This table is the single source of truth for both the template renderer
and the section classifier: a heading added to the template must be added
here with its strategy, or the merge engine will treat it as user content.
"""

from ...models import SectionMergeStrategy

BOOTSTRAP_HEADING = "## 🚨 MANDATORY: Load CodeOps Rules Before Any Work"
PROJECT_OVERVIEW_HEADING = "## Project Overview"
TOOLCHAIN_HEADING = "## Toolchain"
COMMANDS_HEADING = "## Commands"
PROJECT_STRUCTURE_HEADING = "## Project Structure"
CODING_CONVENTIONS_HEADING = "## Coding Conventions"
GIT_CONVENTIONS_HEADING = "## Git & Commit Conventions"
SPECIAL_RULES_HEADING = "## Special Rules (Project-Specific)"
CROSS_REFERENCES_HEADING = "## Cross-References"

# Template order. Preserve entries are listed for completeness; unknown
# headings classify as preserve anyway.
SECTION_STRATEGIES: dict[str, SectionMergeStrategy] = {
    BOOTSTRAP_HEADING: SectionMergeStrategy.STATIC,
    PROJECT_OVERVIEW_HEADING: SectionMergeStrategy.AUTO_UPDATE,
    TOOLCHAIN_HEADING: SectionMergeStrategy.AUTO_UPDATE,
    COMMANDS_HEADING: SectionMergeStrategy.AUTO_UPDATE,
    PROJECT_STRUCTURE_HEADING: SectionMergeStrategy.AUTO_UPDATE,
    CODING_CONVENTIONS_HEADING: SectionMergeStrategy.PRESERVE,
    GIT_CONVENTIONS_HEADING: SectionMergeStrategy.PRESERVE,
    SPECIAL_RULES_HEADING: SectionMergeStrategy.PRESERVE,
    CROSS_REFERENCES_HEADING: SectionMergeStrategy.STATIC,
}

AUTO_UPDATE_SECTIONS: tuple[str, ...] = tuple(
    heading
    for heading, strategy in SECTION_STRATEGIES.items()
    if strategy is SectionMergeStrategy.AUTO_UPDATE
)

STATIC_SECTIONS: tuple[str, ...] = tuple(
    heading
    for heading, strategy in SECTION_STRATEGIES.items()
    if strategy is SectionMergeStrategy.STATIC
)

# Field inside the Project Overview section that users fill in by hand
DESCRIPTION_FIELD = "- **Description:**"
DESCRIPTION_PLACEHOLDER = "[TODO: Add project description]"
