"""Mini README: FastAPI-powered expense form for Pocket Ledger.

Structure:
    * create_application - application factory wiring routes and templates.
    * HTML routes - the single ledger page plus its form posts.
    * JSON routes - ``/api`` mirror of the same operations for scripts.

Each application owns one ``LedgerViewModel``. Handlers never await while
touching it, so every request's state change completes before the next
request is handled.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import PocketLedgerSettings, get_settings
from ..formatting import (
    describe_count,
    format_currency,
    format_expense_amount,
    format_expense_date,
)
from ..ledger import ExpenseValidationError, LedgerViewModel
from ..logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)


def create_application(
    settings: Optional[PocketLedgerSettings] = None,
    ledger: Optional[LedgerViewModel] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    ledger = ledger or LedgerViewModel()

    app = FastAPI(title="Pocket Ledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["currency"] = lambda amount: format_currency(
        amount, settings.currency_symbol
    )
    templates.env.filters["expense_amount"] = lambda amount: format_expense_amount(
        amount, settings.currency_symbol
    )
    templates.env.filters["expense_date"] = lambda timestamp: format_expense_date(
        timestamp, settings.date_format
    )
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.ledger = ledger

    def render_page(request: Request, status_code: int = 200) -> HTMLResponse:
        LOGGER.debug(
            "Rendering ledger page with %s expenses (error=%r)",
            len(ledger.expenses),
            ledger.error,
        )
        return templates.TemplateResponse(
            request,
            "ledger.html",
            {
                "expenses": ledger.expenses,
                "draft": ledger.draft,
                "error": ledger.error,
                "total": ledger.total,
                "count_summary": describe_count(len(ledger.expenses)),
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def ledger_page(request: Request) -> HTMLResponse:
        """Render the summary card, the entry form, and the history."""

        return render_page(request)

    @app.post("/expenses", response_class=HTMLResponse)
    async def record_expense(
        request: Request,
        name: str = Form(""),
        amount: str = Form(""),
    ):
        """Copy the posted fields into the draft and submit it."""

        ledger.update_field("name", name)
        ledger.update_field("amount", amount)
        try:
            ledger.submit()
        except ExpenseValidationError:
            return render_page(request, status_code=400)
        return RedirectResponse("/", status_code=303)

    @app.post("/expenses/{expense_id}/delete")
    async def delete_expense(expense_id: int) -> RedirectResponse:
        """Remove one history entry and return to the page."""

        ledger.delete(expense_id)
        return RedirectResponse("/", status_code=303)

    @app.get("/api/ledger")
    async def ledger_snapshot() -> JSONResponse:
        """Return expenses, draft, error, and total as JSON."""

        return JSONResponse(ledger.export_snapshot())

    @app.post("/api/draft")
    async def update_draft(
        field: str = Form(...),
        value: str = Form(""),
    ) -> JSONResponse:
        """Overwrite a single draft field."""

        try:
            draft = ledger.update_field(field, value)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"draft": draft.as_dict()})

    @app.post("/api/expenses")
    async def submit_draft() -> JSONResponse:
        """Submit the current draft as a new expense."""

        try:
            expense = ledger.submit()
        except ExpenseValidationError as error:
            raise HTTPException(status_code=400, detail=error.message) from error
        return JSONResponse(
            {"expense": expense.as_dict(), "total": ledger.json_total}, status_code=201
        )

    @app.delete("/api/expenses/{expense_id}")
    async def remove_expense(expense_id: int) -> JSONResponse:
        """Delete an expense by id; unknown ids leave the ledger as is."""

        ledger.delete(expense_id)
        return JSONResponse(ledger.export_snapshot())

    return app
