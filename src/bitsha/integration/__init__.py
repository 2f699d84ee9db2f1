# Integration Module
"""
Audit logging for hash operations.

Every recorded event is chained to the previous one with the bit-level
SHA-256, so edits to the exported log are detectable.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import event_logger
    return getattr(event_logger, name)

__all__ = [
    'EventType',
    'HashEvent',
    'AuditEntry',
    'EventLogger',
    'ValidationError',
    'create_event_logger',
]
