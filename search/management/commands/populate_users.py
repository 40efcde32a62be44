from django.core.management.base import BaseCommand, CommandError

from search import services
from search.exceptions import EngineError


class Command(BaseCommand):
    help = "Index N (1~100) synthetic users into the users index"

    def add_arguments(self, parser):
        parser.add_argument("count", type=int)
        parser.add_argument("--reset", action="store_true", help="Drop the users index first")

    def handle(self, *args, **opts):
        count = opts["count"]
        if count < 1 or count > 100:
            raise CommandError("ERROR: bad value")

        try:
            if opts["reset"]:
                services.backend().drop_index(services.users_index())
            services.populate(count)
        except EngineError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(self.style.SUCCESS(f"Populated {count} users into {services.users_index()}"))
