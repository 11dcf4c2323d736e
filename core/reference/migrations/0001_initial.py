import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Type',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('data_type', models.CharField(choices=[('ADDRESS', 'Address'), ('PHONE', 'Phone'), ('EMAIL', 'Email'), ('URL', 'Url'), ('NAME', 'Name'), ('STATUS', 'Status'), ('SPONSOR', 'Sponsor'), ('AFFILIATION', 'Affiliation'), ('TERMINATION', 'Termination'), ('ORGANIZATIONAL_UNIT', 'Organizational Unit')], help_text='Category of this type', max_length=30)),
                ('description', models.CharField(help_text="Value within the category (e.g., 'Home')", max_length=100)),
            ],
            options={
                'db_table': 'reference_type',
                'ordering': ['data_type', 'description'],
                'unique_together': {('data_type', 'description')},
            },
        ),
        migrations.CreateModel(
            name='Country',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text='ISO country code', max_length=3, unique=True)),
                ('name', models.CharField(max_length=100)),
            ],
            options={
                'verbose_name_plural': 'Countries',
                'db_table': 'reference_country',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Campus',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=10, unique=True)),
                ('name', models.CharField(max_length=100)),
            ],
            options={
                'verbose_name_plural': 'Campuses',
                'db_table': 'reference_campus',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='IdentifierType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=50, unique=True)),
                ('description', models.CharField(blank=True, max_length=200)),
                ('format', models.CharField(blank=True, max_length=200)),
                ('is_private', models.BooleanField(default=False)),
            ],
            options={
                'db_table': 'reference_identifier_type',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Region',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=10)),
                ('name', models.CharField(max_length=100)),
                ('country', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='regions', to='reference.country')),
            ],
            options={
                'db_table': 'reference_region',
                'ordering': ['country', 'name'],
                'unique_together': {('country', 'code')},
            },
        ),
        migrations.CreateModel(
            name='OrganizationalUnit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(db_index=True, max_length=20, unique=True)),
                ('name', models.CharField(max_length=200)),
                ('campus', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='organizational_units', to='reference.campus')),
                ('organizational_unit_type', models.ForeignKey(blank=True, limit_choices_to={'data_type': 'ORGANIZATIONAL_UNIT'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='organizational_units', to='reference.type')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='children', to='reference.organizationalunit')),
            ],
            options={
                'db_table': 'reference_organizational_unit',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='RoleInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(db_index=True, max_length=20, unique=True)),
                ('title', models.CharField(max_length=100)),
                ('affiliation_type', models.ForeignKey(limit_choices_to={'data_type': 'AFFILIATION'}, on_delete=django.db.models.deletion.PROTECT, related_name='role_infos', to='reference.type')),
                ('campus', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='role_infos', to='reference.campus')),
                ('organizational_unit', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='role_infos', to='reference.organizationalunit')),
            ],
            options={
                'db_table': 'reference_role_info',
                'ordering': ['code'],
            },
        ),
    ]
