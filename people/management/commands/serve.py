"""
Start the People API

Startup sequence:
1. Check the database connection
2. Apply pending schema migrations
3. Serve the API on settings.PORT (or --port)

Usage:
    python manage.py serve
    python manage.py serve --port 6060
"""

import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connection

logger = logging.getLogger('people.serve')


class Command(BaseCommand):
    help = 'Check the database, apply migrations and serve the People API'

    def add_arguments(self, parser):
        parser.add_argument('--port', default=None, help='Listen port (defaults to PORT setting)')
        parser.add_argument('--host', default='0.0.0.0', help='Listen address')
        parser.add_argument('--skip-migrations', action='store_true', help='Do not run migrate on startup')

    def handle(self, *args, **options):
        try:
            connection.ensure_connection()
        except DatabaseError as exc:
            logger.error("Could not connect to the database: %s", exc)
            raise CommandError(f"Could not connect to the database: {exc}") from exc
        logger.info("Connection was set")

        if not options['skip_migrations']:
            call_command('migrate', interactive=False, verbosity=0)
            logger.info("Migrations applied successfully")

        port = options['port'] or settings.PORT
        self.stdout.write(self.style.SUCCESS(f"Serving People API on {options['host']}:{port}"))
        call_command('runserver', f"{options['host']}:{port}", use_reloader=False)
