from django.core.management.base import BaseCommand

from portfolio.conf import config_warning
from portfolio.exceptions import GatewayError
from portfolio.gateway import POLICIES, Gateway


class Command(BaseCommand):
    help = "Report backend configuration and the row count of every portfolio table."

    def add_arguments(self, parser):
        parser.add_argument('tables', nargs='*', help='Tables to probe (default: all)')

    def handle(self, *args, **options):
        warning = config_warning()
        if warning:
            self.stdout.write(self.style.WARNING(warning))
        else:
            self.stdout.write(self.style.SUCCESS('Backend configured'))

        gateway = Gateway(service_role=True)
        for table in options['tables'] or POLICIES:
            try:
                count = gateway.count(table)
            except GatewayError as e:
                self.stdout.write(f"Table '{table}': {self.style.ERROR(e.message)}")
            else:
                self.stdout.write(f"Table '{table}': Exists ({count} rows)")
