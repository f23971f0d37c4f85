"""Lane analytics views and the service facade."""

from .service import AnalyticsService, get_analytics_service

__all__ = ["AnalyticsService", "get_analytics_service"]
