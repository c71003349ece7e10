import uuid

import pytest

from realty_api.core.exceptions import InvalidInputError
from realty_api.services.loan_analysis_service import LoanAnalysisService

ANALYZE_URL = "/api/v1/loan/analyze"
ANALYSES_URL = "/api/v1/loan/analyses"


def test_analyze_approved(client, approved_payload):
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "APPROVED"
    assert "id" in data
    assert "createdAt" in data
    details = data["details"]
    assert details["creditTier"] == "PRIME"
    assert details["assignedRate"] == 8.5
    assert details["maxTenure"] == 30
    assert details["netSurplus"] == 25000.0
    assert details["approvedLoan"] == 3000000.0


def test_analyze_foir_rejection(client, approved_payload):
    approved_payload["existingEmis"] = 45000
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "REJECTED"
    assert data["details"]["netSurplus"] == -15000.0
    assert data["details"]["maxEligibleLoan"] is None


def test_analyze_tenure_rejection(client, approved_payload):
    approved_payload["age"] = 58
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 201
    assert response.json()["status"] == "REJECTED"
    assert response.json()["details"]["maxTenure"] == 2


def test_analyze_modified_approval(client, approved_payload):
    approved_payload["monthlyIncome"] = 100000
    approved_payload["loanAmountRequested"] = 20000000
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "MODIFIED_APPROVAL"
    details = data["details"]
    assert details["approvedLoan"] == details["maxEligibleLoan"]
    assert details["approvedLoan"] < details["requestedLoan"]


@pytest.mark.parametrize(
    "field,value",
    [
        ("monthlyIncome", 0),
        ("existingEmis", -1),
        ("creditScore", 250),
        ("creditScore", 901),
        ("age", 0),
        ("loanAmountRequested", -5),
        ("monthlyIncome", 1e30),
        ("existingEmis", 1e30),
        ("loanAmountRequested", 10000000000000),
        ("monthlyIncome", 50000.005),
    ],
)
def test_analyze_rejects_out_of_domain_input(client, approved_payload, field, value):
    approved_payload[field] = value
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 422


def test_analyze_requires_fields(client):
    response = client.post(ANALYZE_URL, json={"monthlyIncome": 50000})
    assert response.status_code == 422


def test_get_analysis_returns_inputs(client, approved_payload):
    created = client.post(ANALYZE_URL, json=approved_payload).json()

    response = client.get(f"{ANALYSES_URL}/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == created["id"]
    assert data["status"] == "APPROVED"
    assert data["monthlyIncome"] == 50000.0
    assert data["creditScore"] == 780
    assert data["loanAmountRequested"] == 3000000.0


def test_get_analysis_not_found(client):
    response = client.get(f"{ANALYSES_URL}/{uuid.uuid4()}")
    assert response.status_code == 404


def test_list_analyses_with_status_filter(client, approved_payload):
    client.post(ANALYZE_URL, json=approved_payload)
    client.post(ANALYZE_URL, json=approved_payload)
    client.post(ANALYZE_URL, json={**approved_payload, "existingEmis": 45000})

    response = client.get(ANALYSES_URL)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["page"] == 1
    assert data["totalPages"] == 1
    assert len(data["items"]) == 3

    rejected = client.get(ANALYSES_URL, params={"status": "REJECTED"}).json()
    assert rejected["total"] == 1
    assert rejected["items"][0]["status"] == "REJECTED"


def test_list_analyses_paginates(client, approved_payload):
    for _ in range(3):
        client.post(ANALYZE_URL, json=approved_payload)

    data = client.get(ANALYSES_URL, params={"page": 2, "page_size": 2}).json()

    assert data["total"] == 3
    assert data["totalPages"] == 2
    assert len(data["items"]) == 1


def test_list_analyses_empty(client):
    data = client.get(ANALYSES_URL).json()

    assert data["total"] == 0
    assert data["items"] == []
    assert data["totalPages"] == 1


def test_emi_simulator_for_principal(client):
    response = client.post(
        "/api/v1/loan/emi",
        json={"annualRate": 12, "tenureYears": 1, "principal": 100000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["tenureMonths"] == 12
    assert data["emi"] == 8884.88
    assert data["totalRepayment"] == 106618.56
    assert data["totalInterest"] == 6618.56
    assert data["maxLoan"] is None


def test_emi_simulator_for_budget(client):
    response = client.post(
        "/api/v1/loan/emi",
        json={"annualRate": 0, "tenureYears": 10, "monthlyBudget": 25000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["maxLoan"] == 3000000.0
    assert data["emi"] is None


def test_emi_simulator_requires_principal_or_budget(client):
    response = client.post(
        "/api/v1/loan/emi", json={"annualRate": 8.5, "tenureYears": 20}
    )
    assert response.status_code == 422


def test_plan_home_loan(client, plan_payload):
    response = client.post("/api/v1/loan/plan", json=plan_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "APPROVED"
    assert data["eligibility"]["limitingFactor"] == "INCOME"
    assert data["propertyCosts"]["propertyValue"] == 7280000.0
    assert data["advisory"]["insights"]


def test_plan_home_loan_credit_rejection(client, plan_payload):
    plan_payload["financialProfile"]["creditScore"] = 600
    response = client.post("/api/v1/loan/plan", json=plan_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "REJECTED"
    assert data["reason"] == "Credit score below minimum threshold"


def test_analyze_maps_invalid_input_to_bad_request(client, approved_payload, monkeypatch):
    async def fake_analyze(self, application):
        raise InvalidInputError({"monthly_income": "must be positive"})

    monkeypatch.setattr(LoanAnalysisService, "analyze", fake_analyze)
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 400
    assert "monthly_income" in response.json()["detail"]


def test_analyze_unexpected_value_error_is_server_error(
    client, approved_payload, monkeypatch
):
    async def fake_analyze(self, application):
        raise ValueError("boom")

    monkeypatch.setattr(LoanAnalysisService, "analyze", fake_analyze)
    response = client.post(ANALYZE_URL, json=approved_payload)

    assert response.status_code == 500
    assert "boom" not in response.json()["detail"]


def test_emi_simulator_rejects_tenure_under_one_month(client):
    response = client.post(
        "/api/v1/loan/emi",
        json={"annualRate": 12, "tenureYears": 0.04, "principal": 100000},
    )
    assert response.status_code == 422


def test_emi_simulator_accepts_one_month_tenure(client):
    response = client.post(
        "/api/v1/loan/emi",
        json={"annualRate": 12, "tenureYears": 0.0834, "principal": 100000},
    )

    assert response.status_code == 200
    assert response.json()["tenureMonths"] == 1


def test_emi_simulator_rejects_unbounded_principal(client):
    response = client.post(
        "/api/v1/loan/emi",
        json={"annualRate": 12, "tenureYears": 10, "principal": 1e30},
    )
    assert response.status_code == 422


def test_plan_home_loan_rejects_unbounded_income(client, plan_payload):
    plan_payload["financialProfile"]["monthlyIncome"] = 1e30
    response = client.post("/api/v1/loan/plan", json=plan_payload)

    assert response.status_code == 422
