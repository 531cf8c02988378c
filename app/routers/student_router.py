# /app/routers/student_router.py

"""
Registration, login and profile endpoints. The router only knows how to call
the student_service and turn its business errors into HTTP errors.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..core import security
from ..core.deps import get_current_student
from ..core.exceptions import AuthenticationError, ValidationError
from ..models.student_model import Student, StudentCreate, StudentLogin, LoginResponse
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=Student, status_code=status.HTTP_201_CREATED, summary="Register a New Student")
def register_student(student_in: StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.create_student(db=db, student=student_in)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Registration failed: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Registration error")


@router.post("/login", response_model=LoginResponse, summary="Log In and Receive a Bearer Token")
def login_student(credentials: StudentLogin, db: DatabaseService = Depends(get_db_service)):
    try:
        student = student_service.authenticate_student(db, email=credentials.email, password=credentials.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = security.create_access_token(subject=student.id, email=student.email)
    return LoginResponse(token=token, student=Student.model_validate(student))


@router.get("/profile", response_model=Student, summary="Get the Authenticated Student's Profile")
def read_student_profile(current_student=Depends(get_current_student)):
    return current_student
