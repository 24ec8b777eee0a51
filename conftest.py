import pytest
from fastapi.testclient import TestClient

import metrics
from colors import ColorScale
from handler import BadgeHandler
from main import create_app
from storage import ViewCounter
from template import BadgeTemplate

MARKER = "$MARKER$"
TEMPLATE = f'<svg><rect fill="{MARKER}"/><text>{MARKER}</text></svg>'


@pytest.fixture(autouse=True)
def clean_metrics():
    # metrics live at module level; keep tests independent
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def metric_value():
    """Reads one counter back from the /metrics text (0 if absent)."""
    def read(name, labels):
        label_str = ",".join(f'{k}="{v}"' for k, v in sorted(labels.items()))
        wanted = f"{name}{{{label_str}}} "
        for line in metrics.generate_text().splitlines():
            if line.startswith(wanted):
                return int(line[len(wanted):])
        return 0
    return read


@pytest.fixture
def scale():
    return ColorScale(["000000", "888888", "ffffff"], max_views=10)


@pytest.fixture
def template():
    return BadgeTemplate.from_source(TEMPLATE, MARKER)


@pytest.fixture
def counter():
    return ViewCounter(lock_timeout=0.05)


@pytest.fixture
def handler(counter, scale, template):
    return BadgeHandler(counter, scale, template)


@pytest.fixture
def client(handler):
    with TestClient(create_app(handler)) as test_client:
        yield test_client
