# /app/models/prediction_model.py

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum

from .performance_model import Grade


class PredictionSource(str, Enum):
    AI = "ai"
    FALLBACK = "fallback"


class PredictionRequest(BaseModel):
    """
    The metrics are declared optional on purpose: a missing metric is reported
    by the prediction service as a 400, not by FastAPI as a 422.
    """
    studentId: Optional[str] = None
    attendance: Optional[float] = None
    assignmentScore: Optional[float] = None
    internalMarks: Optional[float] = None
    projectMarks: Optional[float] = None
    finalExamMarks: Optional[float] = None


class AIPrediction(BaseModel):
    """The strict JSON object the AI capability is asked to return."""
    predictedGrade: Grade
    confidence: float = Field(..., ge=0, le=100)
    predictedValue: float = Field(..., ge=0, le=100)
    suggestions: List[str] = Field(default_factory=list)


class PredictionResult(BaseModel):
    """
    The transient outcome of one prediction. `source` records which path
    produced it and is not part of the JSON response body.
    """
    grade: Grade
    confidenceScore: float = Field(..., ge=0, le=100)
    predictedValue: float
    suggestions: List[str] = Field(default_factory=list, max_length=3)
    source: PredictionSource = PredictionSource.AI


class PredictionResponse(BaseModel):
    predictedGrade: Grade
    confidence: float
    predictedValue: float
    suggestions: List[str]
    message: str = "Prediction generated successfully"
