"""
Test Configuration and Fixtures

- Environment is prepared before any application module is imported
  (settings and the loguru sinks are built at import time)
- Unit tests run pure domain functions and use cases against the real
  in-memory repo with a fixed clock and a temp snapshot file
- HTTP tests use the FastAPI TestClient (see service/festival/http/conftest.py)
"""

import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never touch the real data/ snapshot
    os.environ['SNAPSHOT_PATH'] = str(Path(tempfile.mkdtemp()) / 'festival_snapshot.json')
    os.environ.setdefault('FESTIVAL_YEAR', '2025')
    os.environ.setdefault('SHOW_ID_PREFIX', 'IMP25')


_early_setup_test_environment()

import pytest  # noqa: E402

from festival_ledger.service.festival.app.interface.i_clock import IClock  # noqa: E402
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (  # noqa: E402
    FestivalStore,
)
from festival_ledger.service.festival.driven_adapter.persistence.json_snapshot_file_persister import (  # noqa: E402
    JsonSnapshotFilePersister,
)
from festival_ledger.service.festival.driven_adapter.persistence.seed_data import (  # noqa: E402
    seed_store,
)
from festival_ledger.service.festival.driven_adapter.repo.festival_store_repo_impl import (  # noqa: E402
    FestivalStoreRepoImpl,
)


class FixedClock(IClock):
    def __init__(self, today: str = '2025-10-16', now: str = '18:30') -> None:
        self._today = today
        self._now = now

    def today(self) -> str:
        return self._today

    def now_time(self) -> str:
        return self._now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def seed() -> FestivalStore:
    return seed_store()


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    return tmp_path / 'festival_snapshot.json'


@pytest.fixture
def persister(snapshot_path: Path) -> JsonSnapshotFilePersister:
    return JsonSnapshotFilePersister(path=snapshot_path)


@pytest.fixture
def repo(persister: JsonSnapshotFilePersister) -> FestivalStoreRepoImpl:
    """Repo without a task group: snapshot writes happen inline."""
    return FestivalStoreRepoImpl(persister=persister)
