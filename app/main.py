"""
Plasma Rule Engine - FastAPI Application

API endpoints for:
- Evaluating classified biomarker measurements against the rule table
- Listing the biomarker registry and the rule table
- Health checks
"""
from contextlib import asynccontextmanager
from datetime import datetime
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.plasma import (
    biomarker_label,
    get_engine,
    list_biomarkers,
    measurements_from_dicts,
)
from app.models.plasma import (
    BiomarkersResponse,
    EvaluationRequest,
    EvaluationResponse,
    HealthResponse,
    RulesResponse,
)
from app.utils import get_logger, PlasmaError

logger = get_logger(__name__)

START_TIME = datetime.now()


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared engine before serving requests."""
    engine = get_engine()
    logger.info(f"Rule table loaded: {len(engine.rules)} rule(s)")
    logger.info("API ready to accept requests")
    yield
    logger.info("Plasma Rule Engine API shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title=settings.app_name,
    description="Rule-based advisories from classified laboratory biomarker values",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PlasmaError)
async def plasma_error_handler(request: Request, exc: PlasmaError):
    logger.warning(f"{request.url.path}: {exc.code} — {exc.message}")
    return JSONResponse(status_code=422, content=exc.to_dict())


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
        rule_count=len(get_engine().rules),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.get(f"{settings.api_v1_prefix}/biomarkers", response_model=BiomarkersResponse, tags=["Registry"])
async def get_biomarkers():
    """List the biomarker registry."""
    biomarkers = list_biomarkers()
    return {"count": len(biomarkers), "biomarkers": biomarkers}


@app.get(f"{settings.api_v1_prefix}/rules", response_model=RulesResponse, tags=["Registry"])
async def get_rules():
    """List the rule table in evaluation order."""
    rules = []
    for rule in get_engine().rules:
        entry = rule.to_dict()
        entry["biomarker_labels"] = [biomarker_label(b) for b in entry["biomarker_ids"]]
        rules.append(entry)
    return {"count": len(rules), "rules": rules}


@app.post(f"{settings.api_v1_prefix}/plasma/evaluate", response_model=EvaluationResponse, tags=["Evaluation"])
async def evaluate(request: EvaluationRequest):
    """
    Evaluate a batch of classified measurements.

    Outputs are returned in rule-table order; sorting by importance is left
    to the caller.
    """
    measurements = measurements_from_dicts(m.model_dump() for m in request.measurements)

    engine = get_engine()
    outputs = engine.process(measurements)
    summary = engine.summarise(outputs)

    return EvaluationResponse(
        evaluation_id=f"EVAL-{uuid.uuid4().hex[:12].upper()}",
        timestamp=datetime.now().isoformat(),
        outputs=summary.pop("outputs"),
        summary=summary,
    )


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
