import django.db.models.deletion
import registry.person.models.activation_key
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('reference', '0001_initial'),
        ('sor', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('gender', models.CharField(blank=True, choices=[('M', 'Male'), ('F', 'Female'), ('U', 'Unknown')], max_length=1)),
            ],
            options={
                'verbose_name': 'Person',
                'verbose_name_plural': 'People',
                'db_table': 'person',
            },
        ),
        migrations.CreateModel(
            name='Name',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('prefix', models.CharField(blank=True, max_length=20)),
                ('given', models.CharField(max_length=100)),
                ('middle', models.CharField(blank=True, max_length=100)),
                ('family', models.CharField(blank=True, max_length=100)),
                ('suffix', models.CharField(blank=True, max_length=20)),
                ('is_official', models.BooleanField(default=False)),
                ('is_preferred', models.BooleanField(default=False)),
                ('name_type', models.ForeignKey(blank=True, limit_choices_to={'data_type': 'NAME'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='names', to='person.person')),
            ],
            options={
                'db_table': 'person_name',
                'ordering': ['-is_official', '-is_preferred', 'pk'],
            },
        ),
        migrations.CreateModel(
            name='Identifier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('value', models.CharField(max_length=100)),
                ('is_primary', models.BooleanField(default=False)),
                ('is_deleted', models.BooleanField(default=False)),
                ('identifier_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='identifiers', to='reference.identifiertype')),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='identifiers', to='person.person')),
            ],
            options={
                'db_table': 'person_identifier',
                'ordering': ['identifier_type', '-is_primary'],
                'unique_together': {('identifier_type', 'value')},
            },
        ),
        migrations.CreateModel(
            name='Role',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('start_date', models.DateField(help_text='Date this record becomes effective')),
                ('end_date', models.DateField(blank=True, help_text='Date this record ends. NULL = open ended', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('percentage', models.PositiveSmallIntegerField(default=100)),
                ('sponsor_id', models.BigIntegerField(blank=True, null=True)),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='roles', to='person.person')),
                ('person_status', models.ForeignKey(limit_choices_to={'data_type': 'STATUS'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('role_info', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='roles', to='reference.roleinfo')),
                ('sor_role', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='canonical_role', to='sor.sorrole')),
                ('sponsor_type', models.ForeignKey(blank=True, limit_choices_to={'data_type': 'SPONSOR'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('termination_reason', models.ForeignKey(blank=True, limit_choices_to={'data_type': 'TERMINATION'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
            ],
            options={
                'db_table': 'person_role',
                'ordering': ['-start_date'],
            },
        ),
        migrations.CreateModel(
            name='ActivationKey',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(default=registry.person.models.activation_key.generate_key_value, max_length=64, unique=True)),
                ('start', models.DateTimeField()),
                ('end', models.DateTimeField()),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activation_keys', to='person.person')),
            ],
            options={
                'db_table': 'person_activation_key',
            },
        ),
    ]
