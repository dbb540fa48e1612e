# api/main.py
"""
FastAPI backend for beam_analysis - exposes the analysis engine as REST API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from beam_analysis import (
    Beam, Material, BeamAnalysis, InvalidGeometry, UnsupportedCondition, UnsupportedQuantity,
)
from beam_analysis.catalog import MATERIALS, get_material
from beam_analysis.conditions import TwoSpanUnequal, two_span_reactions
from beam_analysis.config import CONFIG
from beam_analysis.diagrams import get_beam_summary
from beam_analysis.export import results_to_csv
from beam_analysis.logging_setup import setup_logging

logger = logging.getLogger("beam_analysis.api")

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Beam Analysis API",
    description="Deflection, bending moment and shear force curves under UDL",
    version=CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ANALYSIS = BeamAnalysis()


# =============================================================================
# Request/Response Models
# =============================================================================

class BeamParams(BaseModel):
    """Beam geometry, material and load."""
    primary_span: float = Field(..., gt=0, description="Primary span (m)")
    secondary_span: float = Field(0.0, ge=0, description="Secondary span (m), two-span only")
    load: float = Field(..., description="UDL intensity (kN/m), negative flips direction")
    condition: str = Field(CONFIG.default_condition, description="simply-supported, two-span-unequal")
    material: Optional[str] = Field(None, description="Catalog key, see /api/materials")
    EI: Optional[float] = Field(None, gt=0, description="Flexural rigidity (N·mm²), overrides material")
    load_distribution_factor: float = Field(1.0, gt=0, description="Deflection multiplier j")


class AnalyzeParams(BeamParams):
    quantity: str = Field("deflection", description="deflection, bendingmoment, shearforce")


class CurveData(BaseModel):
    """One sampled curve, as consumed by the chart."""
    analys: str
    xdata: List[float]
    ydata: List[float]


class AnalyzeResult(BaseModel):
    beam: Dict[str, Any]
    load: float
    equation: CurveData


class ReactionsData(BaseModel):
    m1: float
    r1: float
    r2: float
    r3: float


class AnalyzeAllResult(BaseModel):
    condition: str
    beam: Dict[str, Any]
    load: float
    curves: Dict[str, CurveData]
    summary: Dict[str, Any]
    reactions: Optional[ReactionsData] = None


# =============================================================================
# Helpers
# =============================================================================

def build_beam(params: BeamParams) -> Beam:
    """Resolve the material and build the Beam (ValueError on unknown material)."""
    if params.EI is not None:
        material = Material("custom", {"EI": params.EI})
    else:
        material = get_material(params.material or CONFIG.default_material)
    return Beam(
        primary_span=params.primary_span,
        secondary_span=params.secondary_span,
        material=material,
        load_distribution_factor=params.load_distribution_factor,
    )


def run_all(params: BeamParams):
    try:
        beam = build_beam(params)
        results = ANALYSIS.analyze_all(beam, params.load, params.condition)
    except (UnsupportedCondition, InvalidGeometry, ValueError) as e:
        logger.info("Rejected request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return beam, results


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Beam Analysis API"}


@app.get("/api/conditions")
async def list_conditions():
    return {"conditions": ANALYSIS.conditions}


@app.get("/api/materials")
async def list_materials():
    return {
        "materials": {
            key: {"name": m.name, "properties": dict(m.properties)}
            for key, m in MATERIALS.items()
        },
        "default": CONFIG.default_material,
    }


@app.post("/api/analyze", response_model=AnalyzeResult)
async def analyze_curve(params: AnalyzeParams):
    """One curve for one beam."""
    try:
        beam = build_beam(params)
        result = ANALYSIS.analyze(beam, params.load, params.condition, params.quantity)
    except (UnsupportedCondition, UnsupportedQuantity, InvalidGeometry, ValueError) as e:
        logger.info("Rejected request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


@app.post("/api/analyze/all", response_model=AnalyzeAllResult)
async def analyze_all_curves(params: BeamParams):
    """All three curves, their peaks and, for two spans, the reactions."""
    beam, results = run_all(params)

    reactions = None
    if params.condition == TwoSpanUnequal.condition:
        r = two_span_reactions(beam.primary_span, beam.secondary_span, params.load)
        reactions = ReactionsData(m1=r.m1, r1=r.r1, r2=r.r2, r3=r.r3)

    return AnalyzeAllResult(
        condition=params.condition,
        beam=beam.to_dict(),
        load=params.load,
        curves={q: CurveData(**res.equation.to_dict()) for q, res in results.items()},
        summary=get_beam_summary(results),
        reactions=reactions,
    )


@app.post("/api/export/csv")
async def export_csv(params: BeamParams):
    """Export all three curves as CSV."""
    _, results = run_all(params)
    return StreamingResponse(
        iter([results_to_csv(results)]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_curves.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
