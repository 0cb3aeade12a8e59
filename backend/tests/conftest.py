import os
import sys

import pytest

# Get the absolute path of the backend directory
backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Add the backend directory to the Python path
sys.path.append(backend_dir)

# Keep test runs from writing a log file into the working directory
os.environ.setdefault("CALCULATOR_LOG_FILE", "")


@pytest.fixture
def history_store(tmp_path):
    from calculator_app.core.history import HistoryStore

    return HistoryStore(
        path=str(tmp_path / "history.json"),
        key="calculator.history.v1",
        limit=20,
    )


@pytest.fixture
def client(history_store):
    from fastapi.testclient import TestClient
    from calculator_app.main import app
    from calculator_app.routes.calculator import get_history_store

    app.dependency_overrides[get_history_store] = lambda: history_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
