from __future__ import annotations

import pytest

from school_service.settings import SchoolServiceSettings


@pytest.fixture
def settings(tmp_path) -> SchoolServiceSettings:
    return SchoolServiceSettings(DATABASE_URL=f"sqlite:///{tmp_path / 'schoolData.db'}")
