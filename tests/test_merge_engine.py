"""Tests for incremental project.md merging."""

import pytest

from codeops.engine.core import MergeChange
from codeops.engine.merge import (
    format_change_log,
    format_project_md,
    insert_change_log,
    is_placeholder,
    merge_project_md,
)
from codeops.engine.merge.merge_engine import (
    NEW_SECTION_DESCRIPTION,
    OVERVIEW_UPDATED_DESCRIPTION,
    UPDATED_DESCRIPTION,
)

from conftest import SCAN_DATE

PLACEHOLDER_LINE = "- **Description:** [TODO: Add project description]"
NO_CHANGES_BANNER = (
    "> **✅ Re-analyzed by `analyze_project`** (no changes detected)\n"
    "> **Scanned:** 2026-01-15"
)


class TestChangeLog:
    def test_no_changes(self):
        assert format_change_log([], SCAN_DATE) == NO_CHANGES_BANNER

    def test_with_changes(self):
        log = format_change_log(
            [MergeChange("Toolchain", UPDATED_DESCRIPTION), MergeChange("Commands", "Custom")],
            SCAN_DATE,
        )
        assert log.split("\n") == [
            "> **🔄 Updated by `analyze_project`** (incremental update)",
            "> **Scanned:** 2026-01-15",
            "> **Changes detected:**",
            "> - Toolchain: Updated with fresh scan data",
            "> - Commands: Custom",
        ]

    def test_defaults_to_today(self):
        assert "> **Scanned:** 20" in format_change_log([])

    def test_inserted_after_title(self):
        assert insert_change_log("# Title\nbody", "> log") == "# Title\n\n> log\nbody"

    def test_prepended_without_title(self):
        assert insert_change_log("## Toolchain\nbody", "> log") == "> log\n## Toolchain\nbody"

    def test_title_inside_code_fence_is_ignored(self):
        body = "```\n# not a title\n```\n# Real Title\ntext"
        lines = insert_change_log(body, "> log").split("\n")
        assert lines[3] == "# Real Title"
        assert lines[4:6] == ["", "> log"]

    def test_fenced_title_only_prepends(self):
        body = "```\n# not a title\n```"
        assert insert_change_log(body, "> log") == "> log\n" + body


class TestIsPlaceholder:
    @pytest.mark.parametrize("value", [None, "", "[TODO: Add project description]", "[todo later]"])
    def test_placeholders(self, value):
        assert is_placeholder(value)

    @pytest.mark.parametrize("value", ["A real description", "Mentions [TODO] later"])
    def test_real_values(self, value):
        assert not is_placeholder(value)


class TestMergeProjectMd:
    def test_merge_with_itself_is_idempotent(self, analysis):
        fresh = format_project_md(analysis)
        result = merge_project_md(fresh, fresh, SCAN_DATE)

        assert result.changes == []
        assert not result.changed
        assert result.text.replace("\n\n" + NO_CHANGES_BANNER, "", 1) == fresh

    @pytest.mark.parametrize("existing", [None, "", "   \n\t\n"])
    def test_missing_existing_returns_fresh(self, analysis, existing):
        fresh = format_project_md(analysis)
        result = merge_project_md(existing, fresh, SCAN_DATE)
        assert result.text == fresh
        assert result.changes == []

    def test_toolchain_change_is_recorded(self, analysis):
        existing = format_project_md(analysis)
        updated = analysis.model_copy(update={"languages": ["Python", "Rust"]})
        result = merge_project_md(existing, format_project_md(updated), SCAN_DATE)

        assert result.changes == [MergeChange("Toolchain", UPDATED_DESCRIPTION)]
        assert "- **Language(s):** Python, Rust" in result.text
        assert "> - Toolchain: Updated with fresh scan data" in result.text
        assert "🔄 Updated by `analyze_project`" in result.text

    def test_minimal_toolchain_update(self):
        existing = "## Toolchain\n- **Language(s):** Go"
        fresh = "## Toolchain\n- **Language(s):** Rust"
        result = merge_project_md(existing, fresh, SCAN_DATE)

        assert result.changes == [MergeChange("Toolchain", UPDATED_DESCRIPTION)]
        assert result.text.startswith("> **🔄 Updated by `analyze_project`**")
        assert result.text.endswith("## Toolchain\n- **Language(s):** Rust")

    def test_user_description_survives(self, analysis):
        fresh = format_project_md(analysis)
        existing = fresh.replace(PLACEHOLDER_LINE, "- **Description:** Billing backend")
        result = merge_project_md(existing, fresh, SCAN_DATE)

        assert "- **Description:** Billing backend" in result.text
        assert PLACEHOLDER_LINE not in result.text
        assert result.changes == []

    def test_overview_name_change_keeps_description(self, analysis):
        existing = format_project_md(analysis).replace(
            PLACEHOLDER_LINE, "- **Description:** Billing backend"
        )
        renamed = analysis.model_copy(update={"name": "billing-service"})
        result = merge_project_md(existing, format_project_md(renamed), SCAN_DATE)

        assert result.changes == [MergeChange("Project Overview", OVERVIEW_UPDATED_DESCRIPTION)]
        assert "- **Name:** billing-service" in result.text
        assert "- **Description:** Billing backend" in result.text

    def test_placeholder_description_takes_fresh_value(self):
        existing = "## Project Overview\n- **Name:** old\n- **Description:** [TODO: fill]"
        fresh = "## Project Overview\n- **Name:** new\n- **Description:** [TODO: Add project description]"
        result = merge_project_md(existing, fresh, SCAN_DATE)
        assert result.text.endswith(fresh)

    def test_custom_sections_are_never_lost(self, analysis):
        fresh = format_project_md(analysis)
        existing = (
            fresh.replace("[TODO: Add any project-specific rules]", "Never touch prod.")
            + "\n\n## My Custom Notes\n\nKeep me."
        )
        result = merge_project_md(existing, fresh, SCAN_DATE)

        assert "Never touch prod." in result.text
        assert "## My Custom Notes\n\nKeep me." in result.text
        assert result.text.count("## Special Rules (Project-Specific)") == 1
        assert result.changes == []

    def test_preserved_section_is_not_appended_again(self, analysis):
        existing = "# Mine\n\n## Coding Conventions\n\nmine"
        result = merge_project_md(existing, format_project_md(analysis), SCAN_DATE)
        assert result.text.count("## Coding Conventions") == 1
        assert "## Coding Conventions\n\nmine" in result.text

    def test_missing_sections_are_appended(self, analysis):
        existing = "# My Project\n\n## Toolchain\n\n- old\n"
        result = merge_project_md(existing, format_project_md(analysis), SCAN_DATE)

        assert result.changes[0] == MergeChange("Toolchain", UPDATED_DESCRIPTION)
        assert MergeChange("Project Overview", NEW_SECTION_DESCRIPTION) in result.changes
        assert len(result.changes) == 9
        assert result.text.index("## Toolchain") < result.text.index("## Project Overview")
        assert result.text.startswith("# My Project\n\n> **🔄 Updated")
        assert "# Generated Project Configuration" not in result.text

    def test_static_sections_are_regenerated(self, analysis):
        fresh = format_project_md(analysis)
        existing = fresh.replace(
            "These rules are **mandatory**", "These rules are optional (user edit)"
        )
        result = merge_project_md(existing, fresh, SCAN_DATE)

        assert "user edit" not in result.text
        assert "These rules are **mandatory**" in result.text
        assert result.changes == []

    def test_unmatched_sections_keep_existing_content(self):
        existing = "## Commands\n\ncustom build\n## Cross-References\n\nmine"
        fresh = "# T\n\n## Toolchain\n\nx"
        result = merge_project_md(existing, fresh, SCAN_DATE)

        assert "custom build" in result.text
        assert "## Cross-References\n\nmine" in result.text
        assert result.changes == [MergeChange("Toolchain", NEW_SECTION_DESCRIPTION)]

    def test_heading_less_document(self, analysis):
        result = merge_project_md("Just my notes.", format_project_md(analysis), SCAN_DATE)

        assert len(result.changes) == 9
        assert all(c.description == NEW_SECTION_DESCRIPTION for c in result.changes)
        assert result.changes[0].section == "MANDATORY: Load CodeOps Rules Before Any Work"
        assert result.text.startswith("> **🔄 Updated")
        assert "Just my notes." in result.text

    def test_second_merge_reports_no_changes(self, analysis):
        existing = "# My Project\n\n## Toolchain\n\n- old\n"
        fresh = format_project_md(analysis)
        first = merge_project_md(existing, fresh, SCAN_DATE)
        second = merge_project_md(first.text, fresh, SCAN_DATE)
        assert second.changes == []
