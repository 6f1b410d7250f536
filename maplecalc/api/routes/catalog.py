"""Generic catalogue calculator routes."""

from fastapi import APIRouter, HTTPException

from maplecalc.api.schemas import (
    CalculateRequest,
    CalculatorDescriptorResponse,
    CalculatorOutcomeResponse,
    CalculatorSummaryResponse,
    FieldSpecResponse,
)
from maplecalc.config import settings
from maplecalc.engine.catalog import (
    CATALOG,
    CalculatorDescriptor,
    get_descriptor,
    run_catalog_calculator,
)

router = APIRouter(prefix=f"{settings.api_prefix}/catalog", tags=["catalog"])


def _lookup(slug: str) -> CalculatorDescriptor:
    try:
        return get_descriptor(slug)
    except KeyError:
        raise HTTPException(status_code=404, detail="Calculator not found")


@router.get("", response_model=list[CalculatorSummaryResponse])
async def list_calculators():
    return [
        CalculatorSummaryResponse(slug=d.slug, title=d.title, result_unit=d.result_unit)
        for d in CATALOG
    ]


@router.get("/{slug}", response_model=CalculatorDescriptorResponse)
async def describe(slug: str):
    d = _lookup(slug)
    return CalculatorDescriptorResponse(
        slug=d.slug,
        title=d.title,
        result_unit=d.result_unit,
        kind=d.kind.value,
        fields=[
            FieldSpecResponse(name=f.name, label=f.label, unit=f.unit, placeholder=f.placeholder)
            for f in d.fields
        ],
        notes=d.notes,
    )


@router.post("/{slug}/calculate", response_model=CalculatorOutcomeResponse)
async def calculate(slug: str, req: CalculateRequest):
    """Always 200 for a known slug; the outcome status carries input problems."""
    _lookup(slug)
    outcome = run_catalog_calculator(slug, req.values)
    return CalculatorOutcomeResponse(
        status=outcome.status.value,
        message=outcome.message,
        values=outcome.values,
    )
