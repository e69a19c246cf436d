"""Rule document storage."""

from .rule_store import RuleStore, create_document

__all__ = ["RuleStore", "create_document"]
