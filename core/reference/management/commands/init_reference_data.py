"""
Initialize Reference Data

This management command populates the database with the reference data
every feeding system relies on:
- Types (statuses, sponsor kinds, address/phone/email/url/name types...)
- Identifier types (NETID, EMPLID, SSN)

Usage:
    python manage.py init_reference_data

This is idempotent - safe to run multiple times.
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from core.reference.models import Type, IdentifierType
from core.reference.reference_config import REFERENCE_TYPES, IDENTIFIER_TYPES


class Command(BaseCommand):
    help = 'Initialize reference data (types, identifier types)'

    def handle(self, *args, **options):
        self.stdout.write('Starting reference data initialization...\n')

        with transaction.atomic():
            # 1. Types
            self.stdout.write('Creating types...')
            types_created = 0
            types_total = 0
            for data_type, descriptions in REFERENCE_TYPES.items():
                for description in descriptions:
                    types_total += 1
                    _, created = Type.objects.get_or_create(
                        data_type=data_type,
                        description=description
                    )
                    if created:
                        types_created += 1
                        self.stdout.write(f"  + Created type: {data_type}/{description}")

            self.stdout.write(self.style.SUCCESS(
                f"Types: {types_created} created, {types_total - types_created} already existed\n"
            ))

            # 2. Identifier types
            self.stdout.write('Creating identifier types...')
            identifier_types_created = 0
            for identifier_data in IDENTIFIER_TYPES:
                identifier_type, created = IdentifierType.objects.get_or_create(
                    name=identifier_data['name'],
                    defaults={
                        'description': identifier_data['description'],
                        'format': identifier_data['format'],
                        'is_private': identifier_data['is_private'],
                    }
                )
                if created:
                    identifier_types_created += 1
                    self.stdout.write(f"  + Created identifier type: {identifier_type.name}")

            self.stdout.write(self.style.SUCCESS(
                f"Identifier types: {identifier_types_created} created, "
                f"{len(IDENTIFIER_TYPES) - identifier_types_created} already existed\n"
            ))

        self.stdout.write(self.style.SUCCESS('Reference data initialization completed.'))
