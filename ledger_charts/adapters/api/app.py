"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledger_charts import __version__
from ledger_charts.adapters.api import budgets, charts
from ledger_charts.application.use_cases.budget_errors import (
    AvailableBudgetNotFoundError,
    InvalidBudgetUpdateError,
)
from ledger_charts.infrastructure.logging.logger import get_usage_logger


def create_app(usage_logger=None) -> FastAPI:
    """Build the API application.

    Args:
        usage_logger: Optional logger receiving one line per request;
            defaults to the usage logger singleton.

    Returns:
        FastAPI: Application with chart and budget routes registered.
    """
    app = FastAPI(title="Ledger Charts", version=__version__)
    app.include_router(charts.router)
    app.include_router(budgets.router, prefix="/api/v1")

    @app.middleware("http")
    async def log_usage(request: Request, call_next):
        response = await call_next(request)
        logger = usage_logger or get_usage_logger()
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}"
        )
        return response

    @app.exception_handler(AvailableBudgetNotFoundError)
    async def budget_not_found(
        request: Request,
        exc: AvailableBudgetNotFoundError,
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidBudgetUpdateError)
    async def invalid_budget_update(
        request: Request,
        exc: InvalidBudgetUpdateError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "message": "The given data was invalid.",
                "errors": {exc.field: [str(exc)]},
            },
        )

    return app


app = create_app()


__all__ = ["create_app", "app"]
