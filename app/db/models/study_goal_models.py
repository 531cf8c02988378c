# /app/db/models/study_goal_models.py

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class StudyGoal(Base):
    """
    A single study goal. Goals are created manually or by the study-plan
    generator, move freely between statuses, and are deleted explicitly.
    """
    __tablename__ = "study_goals"

    id = Column(String, primary_key=True, index=True)
    studentId = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    subject = Column(String, nullable=False)
    topic = Column(String, nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=False, index=True)
    priority = Column(String, nullable=False, default="medium")
    status = Column(String, nullable=False, default="pending")
    createdAt = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("Student", back_populates="study_goals")
