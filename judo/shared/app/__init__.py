"""Application-level wiring shared across domains."""

from judo.shared.app.runtime import RuntimeConfig
from judo.shared.app.services import AppServices, build_app_services

__all__ = ["AppServices", "RuntimeConfig", "build_app_services"]
