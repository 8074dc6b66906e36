from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.access_token import AccessToken  # noqa: F401
from backend.app.models.course import Course  # noqa: F401
from backend.app.models.training_schedule import TrainingSchedule  # noqa: F401
from backend.app.models.student import Student  # noqa: F401
from backend.app.models.student_training import StudentTraining  # noqa: F401
