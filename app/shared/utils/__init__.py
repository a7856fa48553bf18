# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Helpful tools other parts of the app use for common tasks, mainly logging.

# 🧪 Purpose (Technical Summary):
# Utilities package exposing the structured logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: bootstrap, domain services, unit of work

from .logging import (
    StructuredLogger,
    get_logger,
    log_context,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

__all__ = [
    "StructuredLogger",
    "get_logger",
    "log_context",
    "log_shutdown_event",
    "log_startup_event",
    "setup_logging",
]
