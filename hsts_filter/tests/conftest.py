import pytest

from hsts_filter.exceptions import ConfigPersistenceError
from hsts_filter.registry import policy_store
from hsts_filter.store import PolicyStore


class MemoryBackend:
    """Backend keeping the document in memory, standing in for a restartable store."""

    def __init__(self, document=None):
        self.document = document
        self.reads = 0
        self.writes = 0
        self.fail_writes = False

    def read(self):
        self.reads += 1
        if self.document is None:
            return None
        return dict(self.document)

    def write(self, document):
        if self.fail_writes:
            raise ConfigPersistenceError("disk full")
        self.writes += 1
        self.document = dict(document)


@pytest.fixture
def memory_backend():
    return MemoryBackend()


@pytest.fixture
def store(memory_backend):
    return PolicyStore(memory_backend)


@pytest.fixture(autouse=True)
def reset_project_store():
    """Each test starts from whatever the (rolled back) database holds."""
    project_store = policy_store.get()
    if project_store is not None:
        project_store.reset()
    yield
    if project_store is not None:
        project_store.reset()
