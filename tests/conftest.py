from pathlib import Path

import pytest

from uniprot_fetch import batch_client

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sleeps(monkeypatch):
    """Records time.sleep calls made by the batch client instead of sleeping."""
    recorded = []
    monkeypatch.setattr(batch_client.time, "sleep", recorded.append)
    return recorded


@pytest.fixture
def three_entries_xml():
    return (DATA_DIR / "three_entries.xml").read_bytes()
