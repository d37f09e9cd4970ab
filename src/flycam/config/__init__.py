"""Host-side configuration for flycam controllers."""

from .logging_policy import DebugPolicy, LoggingToggles, load_debug_policy
from .models import ControllerCtx, load_controller_ctx, load_settings

__all__ = [
    "ControllerCtx",
    "DebugPolicy",
    "LoggingToggles",
    "load_controller_ctx",
    "load_debug_policy",
    "load_settings",
]
