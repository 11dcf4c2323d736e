"""
Tests that the shipped migrations describe the current models.
"""
import io
from django.test import TestCase
from django.core.management import call_command
from django.db import connection
from django.db.migrations.loader import MigrationLoader


class MigrationsTest(TestCase):
    """Test the migration graph of the registry apps"""

    def test_every_app_has_an_initial_migration(self):
        loader = MigrationLoader(connection, ignore_no_migrations=True)
        for app_label in ('reference', 'sor', 'person'):
            self.assertIn((app_label, '0001_initial'), loader.graph.nodes)

    def test_sor_person_link_is_added_after_person_exists(self):
        loader = MigrationLoader(connection, ignore_no_migrations=True)
        plan = loader.graph.forwards_plan(('sor', '0002_sorperson_person'))
        self.assertIn(('person', '0001_initial'), plan)
        self.assertLess(plan.index(('sor', '0001_initial')), plan.index(('person', '0001_initial')))

    def test_models_have_no_pending_changes(self):
        out = io.StringIO()
        # exits non-zero when a model change has no migration
        call_command('makemigrations', 'reference', 'sor', 'person', check=True, dry_run=True, stdout=out)
