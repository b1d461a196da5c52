from schemas.dashboard import DashboardResponse
from schemas.health import HealthMetricCreate, HealthMetricOut, MetricType, TimelineResponse
from schemas.reports import HealthScoreResponse, ReportOverview, ReportSummaryResponse
from schemas.users import UserCreate, UserOut

__all__ = [
    "MetricType",
    "HealthMetricCreate",
    "HealthMetricOut",
    "TimelineResponse",
    "UserCreate",
    "UserOut",
    "ReportOverview",
    "HealthScoreResponse",
    "ReportSummaryResponse",
    "DashboardResponse",
]
