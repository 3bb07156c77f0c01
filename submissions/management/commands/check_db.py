"""Management command that verifies the submissions database answers queries."""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connections


class Command(BaseCommand):
    help = "Run a test query against the submissions database and report the result"

    def add_arguments(self, parser):
        parser.add_argument(
            "--database",
            default=None,
            help="Database alias to check (defaults to IDEAHUB_DATABASE).",
        )

    def handle(self, *args, **options):
        alias = options["database"] or settings.IDEAHUB_DATABASE
        if alias not in settings.DATABASES:
            raise CommandError(f"Unknown database alias: {alias}")

        self.stdout.write(self.style.NOTICE(f"Checking database '{alias}'"))
        try:
            with connections[alias].cursor() as cursor:
                cursor.execute("SELECT 1 + 1")
                (result,) = cursor.fetchone()
        except DatabaseError as e:
            raise CommandError(f"DB connection error: {e}") from e

        self.stdout.write(self.style.SUCCESS(f"DB connected! Test result = {result}"))

        for table in ("contact_messages", "projects"):
            if table in connections[alias].introspection.table_names():
                self.stdout.write(f"  {table}: {self.style.SUCCESS('present')}")
            else:
                self.stdout.write(f"  {table}: {self.style.WARNING('missing (run migrate)')}")
