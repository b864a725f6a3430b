"""
Rules loading tests.

Verifies that rules.yaml loads into frozen models and that broken files
fail fast with a clear error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from src.components.invoices import DEFAULT_CONFIG, InvoiceMutationConfig
from src.rules.loader import load_rules


@pytest.fixture
def rules_path(project_root: Path) -> Path:
    return project_root / "rules.yaml"


@pytest.fixture
def rules_data(rules_path: Path) -> dict[str, Any]:
    return yaml.safe_load(rules_path.read_text())


def write_rules(tmp_path: Path, data: Any) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


class TestLoadRules:
    def test_load_project_rules(self, rules_path: Path) -> None:
        rules = load_rules(rules_path)

        assert rules.listing.path == "/dashboard/invoices"
        assert rules.invoice_form.statuses == ("pending", "paid")

    def test_project_rules_match_component_defaults(self, rules_path: Path) -> None:
        """The shipped rules and the in-code defaults describe the same form."""
        config = InvoiceMutationConfig.from_rules(load_rules(rules_path))

        assert config == DEFAULT_CONFIG

    def test_rules_are_immutable(self, rules_path: Path) -> None:
        rules = load_rules(rules_path)

        with pytest.raises(ValidationError):
            rules.listing.path = "/elsewhere"  # type: ignore[misc]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("listing: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="mapping"):
            load_rules(write_rules(tmp_path, ["a", "b"]))

    def test_missing_section(self, tmp_path: Path, rules_data: dict[str, Any]) -> None:
        del rules_data["messages"]

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(tmp_path, rules_data))

    def test_empty_statuses_rejected(self, tmp_path: Path, rules_data: dict[str, Any]) -> None:
        rules_data["invoice_form"]["statuses"] = []

        with pytest.raises(ValueError, match="status"):
            load_rules(write_rules(tmp_path, rules_data))

    def test_status_outside_invoice_statuses_rejected(
        self, tmp_path: Path, rules_data: dict[str, Any]
    ) -> None:
        rules_data["invoice_form"]["statuses"] = ["pending", "paid", "overdue"]

        with pytest.raises(ValueError, match="statuses"):
            load_rules(write_rules(tmp_path, rules_data))

    def test_listing_path_must_be_absolute(
        self, tmp_path: Path, rules_data: dict[str, Any]
    ) -> None:
        rules_data["listing"]["path"] = "dashboard/invoices"

        with pytest.raises(ValueError):
            load_rules(write_rules(tmp_path, rules_data))
