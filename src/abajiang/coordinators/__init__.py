"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translator_coordinator import TranslatorCoordinator
from .background_coordinator import BackgroundCoordinator

__all__ = [
    "TranslatorCoordinator",
    "BackgroundCoordinator",
]
