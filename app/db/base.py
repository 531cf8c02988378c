# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here ensures the
# Base class knows about every table when Alembic runs its auto-generation scan.

from .base_class import Base

from .models.student_models import Student
from .models.performance_models import Performance
from .models.study_goal_models import StudyGoal
