"""
Agebmi Web Server

FastAPI-based web server exposing the age-adjusted BMI engine.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

# Setup paths
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from agebmi import (
    AgeGroup,
    HealthSummary,
    InvalidMeasurementError,
    MeasurementField,
    __version__,
    evaluate_raw,
    summarize,
    validate_field,
)
from agebmi.config import get_config
from agebmi.engines import reference_ranges, reference_title
from agebmi.exporters import export_json, export_markdown
from knowledge.bands import AGE_GROUP_RANGES

logger = logging.getLogger(__name__)

config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Agebmi",
    description="Agebmi - Age-Adjusted BMI Classification API",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Any JSON value is passed through; the validator reports non-numbers per field
RawField = Any


# Request/Response models
class EvaluateRequest(BaseModel):
    """Raw form input; values are validated by the engine, not by FastAPI."""
    weight: RawField = Field(None, description="Weight in kilograms")
    height: RawField = Field(None, description="Height in centimeters")
    age: RawField = Field(None, description="Age in whole years")


class FieldValidateRequest(BaseModel):
    """Single raw field value."""
    value: RawField = Field(None, description="Raw value as typed")


class FieldValidateResponse(BaseModel):
    field: str
    valid: bool
    error: Optional[str] = None
    code: Optional[str] = None


class AgeGroupInfo(BaseModel):
    """Age group band and its reference table."""
    group: str
    label: str
    min_age: int
    max_age: Optional[int] = None
    bmi_low: float
    bmi_high: float
    note: str
    reference_title: str
    reference_ranges: list[dict[str, str]]


@app.exception_handler(InvalidMeasurementError)
async def invalid_measurement_handler(request, exc: InvalidMeasurementError):
    """Return one error per invalid field."""
    logger.info("Rejected %s: %s", request.url.path, ", ".join(exc.as_dict()))
    return JSONResponse(
        status_code=422,
        content={"detail": "Invalid measurement", "errors": exc.as_dict()},
    )


def _evaluate_request(request: EvaluateRequest) -> HealthSummary:
    result = evaluate_raw(request.weight, request.height, request.age)
    return summarize(result)


# Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.post("/api/evaluate", response_model=HealthSummary)
async def evaluate(request: EvaluateRequest):
    """
    Evaluate a weight/height/age reading.

    Returns the full health summary, or 422 with per-field errors.
    """
    return _evaluate_request(request)


@app.post("/api/validate/{field}", response_model=FieldValidateResponse)
async def validate_single_field(field: str, request: FieldValidateRequest):
    """Validate one field in isolation (inline form validation)."""
    try:
        measurement_field = MeasurementField(field)
    except ValueError:
        raise HTTPException(status_code=404, detail="Unknown field. Use: weight, height, or age")

    error = validate_field(measurement_field, request.value)
    return FieldValidateResponse(
        field=measurement_field.value,
        valid=error is None,
        error=error.message if error else None,
        code=error.code.value if error else None,
    )


@app.get("/api/age-groups", response_model=list[AgeGroupInfo])
async def list_age_groups():
    """List age groups with their healthy bands and reference tables."""
    groups = []
    for group in AgeGroup:
        min_age, max_age = AGE_GROUP_RANGES[group.value]
        groups.append(AgeGroupInfo(
            group=group.value,
            label=group.label,
            min_age=min_age,
            max_age=max_age,
            bmi_low=group.bmi_low,
            bmi_high=group.bmi_high,
            note=group.note,
            reference_title=reference_title(group),
            reference_ranges=[
                {"category": row.category.value, "label": row.label, "range": row.range_text}
                for row in reference_ranges(group)
            ],
        ))
    return groups


@app.post("/api/evaluate/export/{format}")
async def export_evaluation(format: str, request: EvaluateRequest):
    """Evaluate and export the summary as JSON or Markdown."""
    if format not in ("json", "markdown"):
        raise HTTPException(status_code=400, detail="Invalid format. Use: json or markdown")

    summary = _evaluate_request(request)

    if format == "json":
        return PlainTextResponse(
            content=export_json(summary),
            media_type="application/json",
            headers={"Content-Disposition": "attachment; filename=bmi_summary.json"},
        )
    return PlainTextResponse(
        content=export_markdown(summary),
        media_type="text/markdown",
        headers={"Content-Disposition": "attachment; filename=bmi_summary.md"},
    )


def main():
    """Run the server with uvicorn."""
    import uvicorn
    from agebmi.logging import setup_logging

    setup_logging()
    logger.info("Starting Agebmi server on %s:%s", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
