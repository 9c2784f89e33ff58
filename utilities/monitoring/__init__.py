"""
Monitoring
- Provides named loggers for every layer
- Writes JSON log files with size based rotation
- Mirrors log lines to the console
"""

from .factory import MonitoringFactory

__all__ = ["MonitoringFactory"]
