"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status

from diet_ledger.api.models import GoalsPayload, MealLogRequest
from diet_ledger.api.proxy import router as proxy_router
from diet_ledger.app_logging import configure_logging
from diet_ledger.containers import AppContainer
from diet_ledger.domain.nutrients import Totals
from diet_ledger.services.extraction import ExtractionError, MissingCredentialError
from diet_ledger.services.tracking import DailySummary, MealLogResult


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(proxy_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/meals")
    async def log_meal(payload: MealLogRequest, request: Request) -> dict[str, object]:
        """Extract a meal from text, scale it to the slot budget and record it."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.tracking_service.log_meal(
                payload.text, payload.slot, payload.date
            )
        except MissingCredentialError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Server misconfig: OPENAI_API_KEY missing",
            ) from exc
        except ExtractionError as exc:
            logger.warning("Meal extraction failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return _format_meal_result(result)

    @app.get("/today")
    async def today(request: Request) -> dict[str, object]:
        """Return today's totals and goal progress."""
        state_container: AppContainer = request.app.state.container
        return _format_summary(state_container.tracking_service.today())

    @app.get("/days/{day}")
    async def day_summary(day: date, request: Request) -> dict[str, object]:
        """Return totals and goal progress for a date."""
        state_container: AppContainer = request.app.state.container
        return _format_summary(state_container.tracking_service.summary_for(day))

    @app.get("/goals")
    async def get_goals(request: Request) -> GoalsPayload:
        """Return the current goals."""
        state_container: AppContainer = request.app.state.container
        return GoalsPayload.from_config(state_container.tracking_service.goals)

    @app.put("/goals")
    async def put_goals(payload: GoalsPayload, request: Request) -> GoalsPayload:
        """Replace the current goals."""
        state_container: AppContainer = request.app.state.container
        goals = state_container.tracking_service.update_goals(payload.to_config())
        return GoalsPayload.from_config(goals)

    return app


def _format_totals(totals: Totals) -> dict[str, float]:
    return asdict(totals)


def _format_meal_result(result: MealLogResult) -> dict[str, object]:
    return {
        "date": result.date,
        "slot": result.slot.value,
        "budget": result.budget,
        "items": [item.to_wire() for item in result.items],
        "totals": _format_totals(result.totals),
    }


def _format_summary(summary: DailySummary) -> dict[str, object]:
    progress = summary.progress
    return {
        "date": summary.date,
        "totals": _format_totals(summary.totals),
        "slots": {
            slot.value: {
                "totals": _format_totals(totals),
                "entries": summary.entry_counts[slot],
            }
            for slot, totals in summary.slot_totals.items()
        },
        "goals": {
            "target": _format_totals(progress.target),
            "remaining": _format_totals(progress.remaining),
            "percent": _format_totals(progress.percent),
        },
    }
