# /app/routers/prediction_router.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..core.deps import get_prediction_service
from ..core.exceptions import ValidationError
from ..models.prediction_model import PredictionRequest, PredictionResponse
from ..services.database_service import DatabaseService, get_db_service
from ..services.prediction_service import PredictionService

logger = logging.getLogger(__name__)

router = APIRouter()

PREDICTION_SOURCE_HEADER = "X-Prediction-Source"


@router.post(
    "/predict",
    response_model=PredictionResponse,
    summary="Predict a Final Grade",
    description="Asks the AI service for a prediction and falls back to the weighted scoring formula when it cannot answer.",
)
async def predict_performance(
    request: PredictionRequest,
    response: Response,
    db: DatabaseService = Depends(get_db_service),
    service: PredictionService = Depends(get_prediction_service),
):
    try:
        prediction = await service.predict(request, db=db)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Critical error during prediction: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error during prediction")

    response.headers[PREDICTION_SOURCE_HEADER] = prediction.source.value
    return PredictionResponse(
        predictedGrade=prediction.grade,
        confidence=prediction.confidenceScore,
        predictedValue=prediction.predictedValue,
        suggestions=prediction.suggestions,
    )
