"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from maplecalc.api.routes import catalog, debt, housing, planning, savings
from maplecalc.config import settings
from maplecalc.engine.errors import CalculationError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Canadian personal-finance calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(debt.router)
app.include_router(housing.router)
app.include_router(savings.router)
app.include_router(planning.router)
app.include_router(catalog.router)


@app.exception_handler(CalculationError)
async def calculation_error_handler(request: Request, exc: CalculationError):
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=422, content={"detail": exc.detail})


@app.get("/health")
async def health():
    return {"status": "ok"}
