import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from network_blocker import install_network_blocker


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OVERPASS_URL",
        "WIKIDATA_SPARQL_URL",
        "ROEBLING_USER_AGENT",
        "ROEBLING_LANGUAGES",
    ):
        monkeypatch.delenv(name, raising=False)
    install_network_blocker(monkeypatch)
