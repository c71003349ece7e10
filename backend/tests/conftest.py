import os
import tempfile
from pathlib import Path

import pytest

# Settings are read at import time, so point them at a throwaway SQLite file first
_TEST_DB_DIR = tempfile.mkdtemp(prefix="realty-tests-")
TEST_DB_PATH = Path(_TEST_DB_DIR) / "test.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["ENVIRONMENT"] = "test"
os.environ["DB_CREATE_ALL"] = "true"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from realty_api.main import app  # noqa: E402


@pytest.fixture(scope="function")
def client():
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as test_client:
        yield test_client

    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture
def approved_payload():
    return {
        "monthlyIncome": 50000,
        "existingEmis": 5000,
        "creditScore": 780,
        "age": 30,
        "loanAmountRequested": 3000000,
    }


@pytest.fixture
def plan_payload():
    return {
        "financialProfile": {
            "monthlyIncome": 100000,
            "otherObligations": 10000,
            "age": 30,
            "creditScore": 780,
            "employmentStabilityScore": 0.4,
        },
        "loanPreferences": {
            "desiredTenureYears": 20,
            "loanAmountRequested": 3000000,
            "baseInterestRate": 8.5,
            "ltvRatio": 0.8,
        },
        "propertyDetails": {
            "includePlot": True,
            "plotPrice": 2000000,
            "plotSizeSqft": 1000,
            "floors": 2,
            "baseCostPerSqft": 2000,
            "luxuryLevel": 0.5,
            "locationScore": 0.5,
        },
    }
