"""University resource module."""

from university_api.core.universities.models import University
from university_api.core.universities.service import UniversityService

__all__ = ["University", "UniversityService"]
