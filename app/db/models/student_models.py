# /app/db/models/student_models.py

"""
SQLAlchemy model for a registered student. Students own their performance
records and study goals.
"""

from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    rollNumber = Column(String, unique=True, index=True, nullable=False)
    department = Column(String, nullable=False)
    semester = Column(Integer, nullable=False)
    createdAt = Column(DateTime(timezone=True), server_default=func.now())

    performances = relationship("Performance", back_populates="student", cascade="all, delete-orphan")
    study_goals = relationship("StudyGoal", back_populates="student", cascade="all, delete-orphan")
