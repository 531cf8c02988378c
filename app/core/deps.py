# /app/core/deps.py

"""
FastAPI dependency providers: the authenticated student, the process-wide AI
capability, and the orchestrators built on top of it.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import AuthenticationError
from app.services import student_service
from app.services.database_service import DatabaseService, get_db_service
from app.services.gemini_service import TextGenerator, build_text_generator
from app.services.prediction_service import PredictionService
from app.services.study_plan_service import StudyPlanService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_student(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: DatabaseService = Depends(get_db_service),
):
    """Resolves the bearer token to a Student, or rejects the request with 401."""
    token = credentials.credentials if credentials else None
    try:
        return student_service.get_student_from_token(db, token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_text_generator(request: Request) -> TextGenerator:
    """Returns the generator built at startup, creating it lazily if startup was skipped."""
    generator = getattr(request.app.state, "text_generator", None)
    if generator is None:
        generator = build_text_generator()
        request.app.state.text_generator = generator
    return generator


def get_prediction_service(text_generator: TextGenerator = Depends(get_text_generator)) -> PredictionService:
    return PredictionService(text_generator)


def get_study_plan_service(text_generator: TextGenerator = Depends(get_text_generator)) -> StudyPlanService:
    return StudyPlanService(text_generator)
