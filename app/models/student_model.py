# /app/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    name: str = Field(..., min_length=1, description="The full name of the student.")
    email: str = Field(..., min_length=3, description="Login email; unique across all students.")
    rollNumber: str = Field(..., min_length=1, description="Institution roll number; unique across all students.")
    department: str = Field(..., min_length=1)
    semester: int = Field(..., ge=1)

class StudentCreate(StudentBase):
    """The registration payload. The password is hashed before it is stored."""
    password: str = Field(..., min_length=1)

class StudentLogin(BaseModel):
    email: str
    password: str

class Student(StudentBase):
    """
    The public representation of a Student. It never exposes the password hash.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    createdAt: Optional[datetime] = None

class StudentSummary(BaseModel):
    """The trimmed student view embedded in performance listings."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    rollNumber: str
    department: Optional[str] = None
    semester: Optional[int] = None

class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    student: Student
