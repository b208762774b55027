from __future__ import annotations

from devkit.config import ServiceSettings, load_settings

DEFAULT_REFERENCE_LATITUDE = 18.790894
DEFAULT_REFERENCE_LONGITUDE = 78.911850


class SchoolServiceSettings(ServiceSettings):
    SERVICE_NAME: str = "school-service"
    SCHOOL_REFERENCE_LATITUDE: float = DEFAULT_REFERENCE_LATITUDE
    SCHOOL_REFERENCE_LONGITUDE: float = DEFAULT_REFERENCE_LONGITUDE


def load_school_settings() -> SchoolServiceSettings:
    return load_settings("school-service", SchoolServiceSettings)
