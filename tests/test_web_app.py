"""Mini README: HTTP tests for the Pocket Ledger web form and JSON API.

Each test builds a fresh application around its own ledger so state never
leaks between tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pocketledger.configuration import PocketLedgerSettings
from pocketledger.interface import create_application
from pocketledger.ledger import INVALID_DRAFT_MESSAGE, LedgerViewModel


@pytest.fixture()
def ledger() -> LedgerViewModel:
    return LedgerViewModel()


@pytest.fixture()
def client(ledger: LedgerViewModel) -> TestClient:
    settings = PocketLedgerSettings(_env_file=None, currency_symbol="$")
    return TestClient(create_application(settings=settings, ledger=ledger))


def test_empty_page_shows_zero_total(client: TestClient) -> None:
    """A fresh ledger renders the empty-history message and a zero total."""

    response = client.get("/")

    assert response.status_code == 200
    assert "$0.00" in response.text
    assert "Tracking 0 transaction(s)" in response.text
    assert "No transactions recorded yet" in response.text


def test_form_post_records_expense_and_redirects(client: TestClient, ledger: LedgerViewModel) -> None:
    """Valid posts follow post/redirect/get and show up in the history."""

    response = client.post(
        "/expenses", data={"name": "Lunch", "amount": "12.50"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    assert [expense.name for expense in ledger.expenses] == ["Lunch"]

    page = client.get("/").text
    assert "-$12.50" in page
    assert "Total Spent" in page
    assert "Tracking 1 transaction(s)" in page


def test_form_post_with_bad_amount_rerenders_with_error(client: TestClient, ledger: LedgerViewModel) -> None:
    """Invalid posts keep the typed values and show the validation message."""

    response = client.post("/expenses", data={"name": "Lunch", "amount": "abc"})

    assert response.status_code == 400
    assert INVALID_DRAFT_MESSAGE in response.text
    assert 'value="Lunch"' in response.text
    assert ledger.expenses == ()


def test_form_delete_removes_entry(client: TestClient, ledger: LedgerViewModel) -> None:
    """Deleting from the page redirects back with the entry gone."""

    client.post("/expenses", data={"name": "Taxi", "amount": "20"})
    expense_id = ledger.expenses[0].expense_id

    response = client.post(f"/expenses/{expense_id}/delete", follow_redirects=False)

    assert response.status_code == 303
    assert ledger.expenses == ()


def test_api_flow_draft_submit_delete(client: TestClient) -> None:
    """The JSON mirror supports the full edit, submit, delete cycle."""

    assert client.post("/api/draft", data={"field": "name", "value": "Books"}).json() == {
        "draft": {"name": "Books", "amount": ""}
    }
    client.post("/api/draft", data={"field": "amount", "value": "10"})

    created = client.post("/api/expenses")
    assert created.status_code == 201
    expense = created.json()["expense"]
    assert expense["name"] == "Books"
    assert created.json()["total"] == pytest.approx(10.0)

    snapshot = client.get("/api/ledger").json()
    assert snapshot["count"] == 1
    assert snapshot["draft"] == {"name": "", "amount": ""}

    after_delete = client.delete(f"/api/expenses/{expense['id']}").json()
    assert after_delete["count"] == 0
    assert client.delete(f"/api/expenses/{expense['id']}").status_code == 200


def test_api_submit_invalid_draft_returns_400(client: TestClient) -> None:
    """Submitting an empty draft over JSON reports the message and stores it."""

    response = client.post("/api/expenses")

    assert response.status_code == 400
    assert response.json()["detail"] == INVALID_DRAFT_MESSAGE
    assert client.get("/api/ledger").json()["error"] == INVALID_DRAFT_MESSAGE


def test_api_draft_rejects_unknown_field(client: TestClient) -> None:
    """Only the name and amount fields can be edited."""

    response = client.post("/api/draft", data={"field": "category", "value": "x"})

    assert response.status_code == 400


def test_huge_amounts_keep_page_and_api_working(client: TestClient) -> None:
    """A total past the float range renders as Infinity and stays valid JSON."""

    for name in ("Yacht", "Island"):
        client.post("/api/draft", data={"field": "name", "value": name})
        client.post("/api/draft", data={"field": "amount", "value": "1e308"})
        created = client.post("/api/expenses")
        assert created.status_code == 201

    assert created.json()["total"] is None

    page = client.get("/")
    assert page.status_code == 200
    assert "$Infinity" in page.text

    snapshot = client.get("/api/ledger")
    assert snapshot.status_code == 200
    assert snapshot.json()["total"] is None
    assert snapshot.json()["count"] == 2
