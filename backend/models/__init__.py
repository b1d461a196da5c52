from models.appointment import Appointment
from models.exercise_log import ExerciseLog
from models.goal import Goal
from models.health_metric import HealthMetric
from models.meal import Meal
from models.medication import Medication, MedicationLog
from models.user import User

__all__ = [
    "User",
    "HealthMetric",
    "Medication",
    "MedicationLog",
    "Meal",
    "Appointment",
    "Goal",
    "ExerciseLog",
]
