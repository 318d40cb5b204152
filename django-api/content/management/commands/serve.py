from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Run the development server on the configured HOST and PORT"

    def handle(self, *args, **options):
        address = f"{settings.SERVER.host}:{settings.SERVER.port}"
        self.stdout.write(f"Serving on {address}")
        call_command("runserver", address)
