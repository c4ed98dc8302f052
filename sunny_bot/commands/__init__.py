from .keepalive import KeepAliveMixin

__all__ = ["KeepAliveMixin"]
