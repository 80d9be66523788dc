from .plasma import (
    MeasurementInput,
    EvaluationRequest,
    OutputResponse,
    EvaluationSummary,
    EvaluationResponse,
    RuleResponse,
    RulesResponse,
    BiomarkerResponse,
    BiomarkersResponse,
    HealthResponse,
)

__all__ = [
    "MeasurementInput",
    "EvaluationRequest",
    "OutputResponse",
    "EvaluationSummary",
    "EvaluationResponse",
    "RuleResponse",
    "RulesResponse",
    "BiomarkerResponse",
    "BiomarkersResponse",
    "HealthResponse",
]
