# api/main.py
"""
FastAPI backend for beamcalc - exposes the beam analysis engine as a REST API.
"""

import csv
import io
import json
import logging
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from beamcalc import AnalysisError, BeamModel, analyze
from beamcalc.config import API_CONFIG

logger = logging.getLogger("beamcalc.api")


app = FastAPI(
    title=API_CONFIG.title,
    description=API_CONFIG.description,
    version=API_CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=API_CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class SectionData(BaseModel):
    """Section properties, needed only for the FEM method."""
    E: Optional[float] = Field(None, description="Elastic modulus")
    I: Optional[float] = Field(None, description="Second moment of area")


class BeamData(BaseModel):
    length: float = Field(..., gt=0.0, description="Beam length")
    section: SectionData = Field(default_factory=SectionData)


class SupportData(BaseModel):
    id: str
    x: float
    type: Literal["pinned", "roller", "fixed"] = "pinned"


class LoadData(BaseModel):
    """Flat load record; point/moment use x + magnitude, udl uses x_start/x_end + w."""
    id: str
    type: Literal["point", "udl", "moment"]
    magnitude: Optional[float] = None
    w: Optional[float] = None
    x: Optional[float] = None
    x_start: Optional[float] = None
    x_end: Optional[float] = None


class UnitsData(BaseModel):
    length: Literal["m", "cm", "mm", "ft", "in"] = "m"
    force: Literal["kN", "N", "kgf", "lb", "kip"] = "kN"


class AnalysisRequest(BaseModel):
    """Beam configuration plus the advanced-mode flag."""
    beam: BeamData
    supports: List[SupportData] = Field(default_factory=list)
    loads: List[LoadData] = Field(default_factory=list)
    units: UnitsData = Field(default_factory=UnitsData)
    use_fem: bool = Field(False, description="Allow the stiffness-matrix (FEM) method")


class AnalysisResponse(BaseModel):
    success: bool
    error: Optional[str] = None
    error_kind: Optional[str] = None
    results: Optional[Dict[str, Any]] = None


# =============================================================================
# Analysis
# =============================================================================

def request_to_model(request: AnalysisRequest) -> BeamModel:
    return BeamModel.from_dict(request.model_dump(exclude={"use_fem"}))


def run_request(request: AnalysisRequest) -> AnalysisResponse:
    """Analyse one configuration. Failures come back as success=False, never as partial results."""
    try:
        model = request_to_model(request)
        results = analyze(model, use_fem=request.use_fem)
    except AnalysisError as e:
        logger.info("Analysis failed (%s): %s", e.kind, e)
        return AnalysisResponse(success=False, error=str(e), error_kind=e.kind)
    except ValueError as e:
        logger.info("Invalid beam model: %s", e)
        return AnalysisResponse(success=False, error=str(e), error_kind="InvalidModel")

    return AnalysisResponse(success=True, results=results.to_dict())


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": API_CONFIG.title}


@app.post("/api/analyze", response_model=AnalysisResponse)
async def analyze_beam(request: AnalysisRequest):
    """Solve reactions, diagrams and key points for a beam."""
    return run_request(request)


@app.post("/api/export/csv")
async def export_csv(request: AnalysisRequest):
    """Export the key-point table as CSV."""
    result = run_request(request)

    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['x', 'shear_left', 'shear_right', 'moment_left', 'moment_right', 'description'])

    for kp in result.results["key_points"]:
        writer.writerow([
            kp["x"],
            round(kp["shear_left"], 4), round(kp["shear_right"], 4),
            round(kp["moment_left"], 4), round(kp["moment_right"], 4),
            kp["description"],
        ])

    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_key_points.csv"}
    )


@app.post("/api/export/json")
async def export_json(request: AnalysisRequest):
    """Export configuration and results as JSON."""
    result = run_request(request)

    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)

    payload = {
        "version": "1.0",
        "type": "beam",
        "model": request_to_model(request).to_dict(),
        "use_fem": request.use_fem,
        "results": result.results,
    }

    return StreamingResponse(
        iter([json.dumps(payload, indent=2)]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=beam_analysis.json"}
    )


if __name__ == "__main__":
    import uvicorn
    from beamcalc.logging_setup import setup_logging

    setup_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
