"""
API request/response models for the plasma rule endpoints.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, StrictInt


class MeasurementInput(BaseModel):
    """One classified lab value as sent by the upstream classifier."""
    biomarker_id: int = Field(..., description="Registry id of the biomarker")
    value: float = Field(..., description="Measured value")
    range: Optional[Union[StrictInt, str]] = Field(
        None,
        description="Range classification (name or code 1-6); null if unavailable",
    )


class EvaluationRequest(BaseModel):
    """Batch of measurements to evaluate."""
    measurements: List[MeasurementInput] = Field(default_factory=list)


class OutputResponse(BaseModel):
    message: str
    importance: int
    rule_id: int


class EvaluationSummary(BaseModel):
    total_outputs: int
    highest_importance: Optional[int] = None
    importance_counts: Dict[str, int] = Field(default_factory=dict)
    rule_ids: List[int] = Field(default_factory=list)


class EvaluationResponse(BaseModel):
    evaluation_id: str
    timestamp: str
    outputs: List[OutputResponse]
    summary: EvaluationSummary


class RuleResponse(BaseModel):
    id: int
    name: str
    biomarker_ids: List[int]
    biomarker_labels: List[Optional[str]]
    message: str
    importance: int


class RulesResponse(BaseModel):
    count: int
    rules: List[RuleResponse]


class BiomarkerResponse(BaseModel):
    id: int
    name: str
    label: str


class BiomarkersResponse(BaseModel):
    count: int
    biomarkers: List[BiomarkerResponse]


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
    rule_count: int
