"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from rampart.scanner import Ruleset
from rampart.schema import KubernetesSchemaValidator


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def manifests_root(fixtures_root: Path) -> Path:
    """Return the manifest fixture directory."""
    return fixtures_root / "manifests"


@pytest.fixture()
def structural_validator(tmp_path: Path) -> KubernetesSchemaValidator:
    """Validator whose default bundle root does not exist, forcing structural checks."""
    return KubernetesSchemaValidator(default_root=tmp_path / "no-schemas")


@pytest.fixture()
def ruleset(structural_validator: KubernetesSchemaValidator) -> Iterator[Ruleset]:
    """Ruleset over the bundled catalog that never reads a host schema bundle."""
    with Ruleset(validator=structural_validator) as shared:
        yield shared
