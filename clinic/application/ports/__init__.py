from .audit_logger import AuditLogger
from .clock import Clock

__all__ = ["AuditLogger", "Clock"]
