"""Mini README: FastAPI dashboard for Pennywise.

Structure:
    * create_application - application factory wiring routes, templates and
      the session ledger.
    * Activity feed - store subscriber keeping recent changes for the page.

Each application owns one ``LedgerStore`` (``app.state.store``) for its
lifetime. Form handlers validate input, convert the entered amount from the
chosen currency into the canonical unit and only then touch the store.
Read endpoints recompute aggregates on every request and project them into
the requested display currency.
"""

from __future__ import annotations

from collections import deque
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Deque, Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..analytics import summarise
from ..configuration import PennywiseSettings, get_settings
from ..currency import CURRENCY_SYMBOLS, RATES, CurrencyCode, format_amount, project, project_summary, round_for_display
from ..ledger import (
    ChangeKind,
    ExpenseCategory,
    IncomeSource,
    LedgerChange,
    LedgerStore,
    LedgerValidationError,
    label,
    validate_budget,
    validate_expense,
    validate_income,
)
from ..logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)


def _describe(change: LedgerChange) -> str:
    record = change.record
    if change.kind is ChangeKind.EXPENSE_ADDED:
        return f"Expense of {format_amount(record.amount)} in {label(record.category)}"
    if change.kind is ChangeKind.INCOME_ADDED:
        return f"Income of {format_amount(record.amount)} from {label(record.source)}"
    if change.kind is ChangeKind.BUDGET_SET:
        return f"Budget for {label(record.category)} set to {format_amount(record.limit)}"
    return "Ledger cleared"


def create_application(
    settings: Optional[PennywiseSettings] = None,
    store: Optional[LedgerStore] = None,
) -> FastAPI:
    """Create the FastAPI application with its own session ledger."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    store = store if store is not None else LedgerStore()
    activity: Deque[str] = deque(maxlen=settings.activity_feed_size)

    def record_activity(change: LedgerChange) -> None:
        if change.kind is ChangeKind.RESET:
            activity.clear()
        activity.appendleft(_describe(change))

    unsubscribe_activity = store.subscribe(record_activity)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        unsubscribe_activity()
        LOGGER.debug("Detached activity feed from ledger store")

    app = FastAPI(title="Pennywise", version="0.1.0", lifespan=lifespan)
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    app.state.store = store
    app.state.activity = activity
    app.state.unsubscribe_activity = unsubscribe_activity

    def resolve_currency(currency: Optional[str]) -> CurrencyCode:
        if not currency:
            return settings.display_currency
        try:
            return CurrencyCode.from_str(currency)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

    def with_display(payload: Dict[str, object], amount_key: str, code: CurrencyCode) -> Dict[str, object]:
        payload["display_amount"] = round_for_display(project(payload[amount_key], code))
        payload["currency"] = code.value
        return payload

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request, currency: Optional[str] = None) -> HTMLResponse:
        """Render the dashboard in the selected display currency."""

        code = resolve_currency(currency)
        summary = project_summary(summarise(store), code)
        peak = max((entry["amount"] for entry in summary["breakdown"]), default=0.0)
        LOGGER.debug("Rendering dashboard in %s with %s expenses", code.value, len(store.expenses))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "summary": summary,
                "chart_peak": peak or 1.0,
                "currency": code.value,
                "currencies": [member.value for member in CurrencyCode],
                "categories": [member.value for member in ExpenseCategory],
                "sources": [member.value for member in IncomeSource],
                "activity": list(activity),
            },
        )

    @app.get("/api/summary")
    async def api_summary(currency: Optional[str] = None) -> JSONResponse:
        """Return totals, breakdown and budget usage in the display currency."""

        code = resolve_currency(currency)
        return JSONResponse(project_summary(summarise(store), code))

    @app.get("/api/expenses")
    async def api_expenses(currency: Optional[str] = None) -> JSONResponse:
        code = resolve_currency(currency)
        payload = [with_display(record.as_dict(), "amount", code) for record in store.expenses]
        return JSONResponse({"expenses": payload})

    @app.get("/api/income")
    async def api_income(currency: Optional[str] = None) -> JSONResponse:
        code = resolve_currency(currency)
        payload = [with_display(record.as_dict(), "amount", code) for record in store.income]
        return JSONResponse({"income": payload})

    @app.get("/api/budgets")
    async def api_budgets(currency: Optional[str] = None) -> JSONResponse:
        code = resolve_currency(currency)
        payload = [with_display(budget.as_dict(), "limit", code) for budget in store.budgets]
        return JSONResponse({"budgets": payload})

    @app.get("/api/currencies")
    async def api_currencies() -> JSONResponse:
        """Expose the static rate table used for every conversion."""

        return JSONResponse(
            {
                "canonical": CurrencyCode.USD.value,
                "rates": [
                    {"currency": code.value, "symbol": CURRENCY_SYMBOLS[code], "rate": RATES[code]}
                    for code in CurrencyCode
                ],
            }
        )

    @app.post("/expenses")
    async def add_expense(
        amount: str = Form(""),
        category: str = Form(""),
        description: str = Form(""),
        currency: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Validate a submitted expense and append it to the ledger."""

        code = resolve_currency(currency)
        try:
            submission = validate_expense(amount, category, description, code)
        except LedgerValidationError as error:
            LOGGER.info("Rejected expense submission: %s", error)
            raise HTTPException(status_code=400, detail=error.messages) from error
        record = store.add_expense(
            submission.canonical_amount(),
            submission.category,
            submission.description,
        )
        return JSONResponse(with_display(record.as_dict(), "amount", code), status_code=201)

    @app.post("/income")
    async def add_income(
        amount: str = Form(""),
        source: str = Form(""),
        description: str = Form(""),
        currency: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Validate a submitted income entry and append it to the ledger."""

        code = resolve_currency(currency)
        try:
            submission = validate_income(amount, source, description, code)
        except LedgerValidationError as error:
            LOGGER.info("Rejected income submission: %s", error)
            raise HTTPException(status_code=400, detail=error.messages) from error
        record = store.add_income(
            submission.canonical_amount(),
            submission.source,
            submission.description,
        )
        return JSONResponse(with_display(record.as_dict(), "amount", code), status_code=201)

    @app.post("/budgets")
    async def set_budget(
        category: str = Form(""),
        limit: str = Form(""),
        currency: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Validate a budget limit and upsert it for its category."""

        code = resolve_currency(currency)
        try:
            submission = validate_budget(category, limit, code)
        except LedgerValidationError as error:
            LOGGER.info("Rejected budget submission: %s", error)
            raise HTTPException(status_code=400, detail=error.messages) from error
        budget = store.set_budget(submission.category, submission.canonical_limit())
        return JSONResponse(with_display(budget.as_dict(), "limit", code), status_code=201)

    @app.post("/reset")
    async def reset() -> JSONResponse:
        """Clear every record held for the session."""

        store.reset()
        return JSONResponse({"status": "reset"})

    return app
