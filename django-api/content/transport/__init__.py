from content.transport.interfaces import QueryParams, Transport

__all__ = ["QueryParams", "Transport"]
