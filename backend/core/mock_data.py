"""
Deterministic demo data for demo mode.

- User "sarah" with weight/steps/water/sleep targets.
- Seven monthly weight readings going from 68.2 kg down to 65.4 kg.
- One blood pressure, heart rate and sleep reading around "now".
- Three daily medications with today's (not yet taken) reminders.
- Breakfast and lunch today, two appointments, three goals.
- A week of walking logs derived from fixed step counts.
"""
import logging
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from models import (
    Appointment,
    ExerciseLog,
    Goal,
    HealthMetric,
    Meal,
    Medication,
    MedicationLog,
    User,
)
from services.decoding import encode_blood_pressure
from services.users import hash_password

logger = logging.getLogger(__name__)

DEMO_USERNAME = "sarah"
DEMO_PASSWORD = "password123"
WEEK_STEPS = [5200, 7500, 6800, 9200, 8400, 10500, 7800]
WEEK_MINUTES = [45, 52, 48, 63, 58, 70, 55]
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _at(day: datetime, hour: int, minute: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def seed_demo_data(db: Session, now: datetime | None = None) -> User:
    """Insert the demo user and their records. Caller checks the table is empty."""
    now = now or datetime.now()
    today = _at(now, 0)

    user = User(
        username=DEMO_USERNAME,
        password_hash=hash_password(DEMO_PASSWORD),
        first_name="Sarah",
        last_name="Connor",
        email="sarah@example.com",
        date_of_birth=datetime(1985, 6, 15),
        gender="female",
        height=170,
        target_weight=60,
        target_steps=8000,
        target_water_intake=2.5,
        target_sleep=8,
    )
    db.add(user)
    db.flush()

    for i in range(6, -1, -1):
        weight = 68.2 - (2.8 / 6) * (6 - i)
        db.add(
            HealthMetric(
                user_id=user.id,
                type="weight",
                value=f"{weight:.1f}",
                date=now - relativedelta(months=i),
                notes="Regular weigh-in",
            )
        )
    db.add_all(
        [
            HealthMetric(
                user_id=user.id,
                type="blood_pressure",
                value=encode_blood_pressure(120, 80),
                date=now - timedelta(days=1),
                notes="Normal reading",
            ),
            HealthMetric(
                user_id=user.id,
                type="heart_rate",
                value="72",
                date=now - timedelta(hours=2),
                notes="Resting heart rate",
            ),
            HealthMetric(
                user_id=user.id,
                type="sleep",
                value="7.5",
                date=now,
                notes="Good quality sleep",
            ),
        ]
    )

    medications = [
        ("Vitamin D", "1 pill", "08:00", "Take with breakfast", relativedelta(months=1)),
        ("Omega-3", "2 capsules", "12:00", "Take with lunch", relativedelta(months=2)),
        ("Multivitamin", "1 tablet", "18:00", "Take with dinner", relativedelta(weeks=2)),
    ]
    for name, dosage, time, instructions, started_ago in medications:
        med = Medication(
            user_id=user.id,
            name=name,
            dosage=dosage,
            frequency="daily",
            time=f'["{time}"]',
            instructions=instructions,
            start_date=today - started_ago,
            active=True,
        )
        db.add(med)
        db.flush()
        hour, minute = (int(p) for p in time.split(":"))
        db.add(
            MedicationLog(
                medication_id=med.id,
                user_id=user.id,
                taken=False,
                scheduled_time=_at(today, hour, minute),
                notes="",
            )
        )

    db.add_all(
        [
            Meal(
                user_id=user.id,
                name="Breakfast",
                type="breakfast",
                calories=420,
                protein=15,
                carbs=60,
                fat=12,
                date=_at(today, 8, 30),
                notes="",
                foods=["Oatmeal", "Banana", "Almond Milk"],
            ),
            Meal(
                user_id=user.id,
                name="Lunch",
                type="lunch",
                calories=550,
                protein=35,
                carbs=30,
                fat=25,
                date=_at(today, 12, 30),
                notes="",
                foods=["Grilled Chicken Salad"],
            ),
            Appointment(
                user_id=user.id,
                title="Annual Physical",
                doctor="Dr. Jennifer Wilson",
                location="HealthCare Medical Center",
                date=_at(today + timedelta(days=14), 10),
                duration=60,
                status="confirmed",
                notes="",
            ),
            Appointment(
                user_id=user.id,
                title="Dental Checkup",
                doctor="Dr. Robert Smith",
                location="Bright Smile Dental Clinic",
                date=_at(today + timedelta(days=32), 14, 30),
                duration=60,
                status="scheduled",
                notes="",
            ),
            Goal(
                user_id=user.id,
                title="Weight Loss",
                category="weight",
                target="60",
                current_value="65.4",
                initial_value="68.2",
                start_date=today - relativedelta(months=1),
                target_date=today + relativedelta(months=2),
                completed=False,
                progress=34,
                icon="monitor_weight",
            ),
            Goal(
                user_id=user.id,
                title="Running",
                category="exercise",
                target="5",
                current_value="4",
                start_date=today - relativedelta(months=1),
                target_date=today + relativedelta(months=1),
                completed=False,
                progress=80,
                icon="directions_run",
            ),
            Goal(
                user_id=user.id,
                title="Water Intake",
                category="hydration",
                target="2.5",
                current_value="1.5",
                start_date=today - timedelta(days=15),
                target_date=today + timedelta(days=15),
                completed=False,
                progress=60,
                icon="water_drop",
            ),
        ]
    )

    # Monday..Sunday of the current week
    monday = today - timedelta(days=today.weekday())
    for i, steps in enumerate(WEEK_STEPS):
        db.add(
            ExerciseLog(
                user_id=user.id,
                type="walking",
                duration=WEEK_MINUTES[i],
                distance=steps / 1250,
                calories=steps // 20,
                date=monday + timedelta(days=i),
                notes=f"Daily steps on {DAY_NAMES[i]}",
            )
        )

    db.commit()
    logger.info("Seeded demo user %r (id=%s)", DEMO_USERNAME, user.id)
    return user
