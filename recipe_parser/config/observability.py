"""
Logfire setup for the extraction engine.

Library code only emits events (logfire.info / warn / span); configuring where
they go is left to the entry point that owns the process.
"""

import sys

import logfire

from .settings import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> bool:
    """
    Configure logfire from settings.

    Returns:
        True if logfire was configured, False if setup was skipped
    """
    try:
        logfire.configure(
            service_name=settings.service_name,
            send_to_logfire=settings.logfire_send,
            console=None if settings.logfire_console else False,
            scrubbing=False,
        )
        return True
    except Exception as e:
        # Keep running without tracing (no credentials, read-only home, ...)
        print(f"⚠️  Logfire setup skipped: {e}", file=sys.stderr)
        return False
