import argparse
import json

from django.core.management.base import BaseCommand, CommandError

from hsts_filter.exceptions import ConfigPersistenceError, ConfigValidationError
from hsts_filter.registry import get_policy_store


class Command(BaseCommand):
    help = "Show the HSTS policy, or change it when options are given."

    def add_arguments(self, parser):
        parser.add_argument(
            "--send-header",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Enable or disable the Strict-Transport-Security header.",
        )
        parser.add_argument(
            "--max-age",
            help="Max age in seconds.",
        )
        parser.add_argument(
            "--include-subdomains",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Add or drop the includeSubDomains directive.",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the policy document as JSON.",
        )

    def handle(self, *args, **options):
        store = get_policy_store()
        current = store.current()

        changes = {
            "sendHeader": options["send_header"],
            "maxAge": options["max_age"],
            "includeSubDomains": options["include_subdomains"],
        }
        if any(value is not None for value in changes.values()):
            # Unspecified options keep their current value
            document = current.to_document()
            document.update({k: v for k, v in changes.items() if v is not None})
            try:
                store.configure(document)
            except ConfigValidationError as exc:
                details = "; ".join(
                    f"{field}: {' '.join(messages)}" for field, messages in exc.errors.items()
                )
                raise CommandError(f"Invalid HSTS policy: {details}")
            except ConfigPersistenceError as exc:
                self.stderr.write(
                    self.style.WARNING(f"Policy applied but not saved: {exc}")
                )
            else:
                self.stdout.write(self.style.SUCCESS("HSTS policy updated."))

        policy = store.current()
        if options["json"]:
            self.stdout.write(json.dumps(policy.to_document(), sort_keys=True))
            return

        self.stdout.write(f"{store.display_name()}")
        self.stdout.write(f"  send header:        {policy.send_header}")
        self.stdout.write(f"  max-age:            {policy.max_age}")
        self.stdout.write(f"  include subdomains: {policy.include_subdomains}")
        if policy.send_header and policy.header_value():
            self.stdout.write(f"  header: Strict-Transport-Security: {policy.header_value()}")
        else:
            self.stdout.write("  header: (not sent)")
