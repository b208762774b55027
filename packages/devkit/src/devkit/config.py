from __future__ import annotations

from typing import TypeVar

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite:///./schoolData.db"

SettingsT = TypeVar("SettingsT", bound="ServiceSettings")


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    SERVICE_NAME: str = "service"
    DATABASE_URL: str = DEFAULT_DATABASE_URL


def load_settings(service_name: str, settings_cls: type[SettingsT] = ServiceSettings) -> SettingsT:
    return settings_cls(SERVICE_NAME=service_name)
