"""Django signals for database query logging."""

from django.conf import settings
from django.db.backends.signals import connection_created
from django.dispatch import receiver


@receiver(connection_created)
def enable_query_logging(sender, connection, **kwargs):
    """Log every query on ``django.db.backends`` when DATABASE_DEBUG is set, even with DEBUG off."""
    if settings.DATABASE_DEBUG:
        connection.force_debug_cursor = True
