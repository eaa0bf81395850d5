"""k1s0 flag events library."""

from .client import FlagEventsClient
from .config import ClientConfig, EventsSection, LogSection, load_config
from .dispatch import DispatchMode, EventDispatcher
from .exceptions import FlagEventsError, FlagEventsErrorCodes
from .factory import build_custom_event, build_feature_event, build_identify_event
from .identity import Identity, sanitize_user
from .interfaces import EventQueue, FlagStore, Platform, StateProvider
from .logger import logger_from_config, new_logger
from .memory import InMemoryEventQueue, InMemoryFlagStore, InMemoryStateProvider
from .models import (
    CustomEvent,
    EvaluationDetail,
    Event,
    EventKind,
    FeatureEvent,
    FlagEvaluationResult,
    IdentifyEvent,
    User,
)
from .platform import EnvironmentPlatform, StaticPlatform
from .privacy import PrivacyGate

__all__ = [
    "ClientConfig",
    "CustomEvent",
    "DispatchMode",
    "EnvironmentPlatform",
    "EvaluationDetail",
    "Event",
    "EventDispatcher",
    "EventKind",
    "EventQueue",
    "EventsSection",
    "FeatureEvent",
    "FlagEvaluationResult",
    "FlagEventsClient",
    "FlagEventsError",
    "FlagEventsErrorCodes",
    "FlagStore",
    "Identity",
    "IdentifyEvent",
    "InMemoryEventQueue",
    "InMemoryFlagStore",
    "InMemoryStateProvider",
    "LogSection",
    "Platform",
    "PrivacyGate",
    "StateProvider",
    "StaticPlatform",
    "User",
    "build_custom_event",
    "build_feature_event",
    "build_identify_event",
    "load_config",
    "logger_from_config",
    "new_logger",
    "sanitize_user",
]
