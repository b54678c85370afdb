"""Shared test fixtures."""

from pathlib import Path

import pytest

from ead_outline.core.document import EadDocument, parse_ead
from tests.unit.samples import FINDING_AID


@pytest.fixture
def finding_aid() -> EadDocument:
    """Return the parsed sample finding aid."""
    return parse_ead(FINDING_AID)


@pytest.fixture
def finding_aid_path(tmp_path: Path) -> Path:
    """Write the sample finding aid to disk and return its path."""
    path = tmp_path / "finding-aid.xml"
    path.write_text(FINDING_AID, encoding="utf-8")
    return path
