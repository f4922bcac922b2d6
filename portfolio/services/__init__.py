"""
Domain access services.

Usage:
    from portfolio.services import ProjectService

    projects = ProjectService(request.gateway)
    projects.list_by_category('web')
"""

from .about import AboutService
from .analytics import AnalyticsService
from .documents import DocumentService
from .experience import ExperienceService
from .messages import MessageService
from .projects import ProjectService

__all__ = [
    "AboutService",
    "AnalyticsService",
    "DocumentService",
    "ExperienceService",
    "MessageService",
    "ProjectService",
]
