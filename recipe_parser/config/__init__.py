from .settings import Settings, settings
from .observability import configure_logging

__all__ = ['Settings', 'settings', 'configure_logging']
