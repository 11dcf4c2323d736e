import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('reference', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SorPerson',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('source_sor', models.CharField(max_length=50)),
                ('sor_id', models.CharField(max_length=100)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('gender', models.CharField(blank=True, choices=[('M', 'Male'), ('F', 'Female'), ('U', 'Unknown')], max_length=1)),
            ],
            options={
                'db_table': 'sor_person',
                'ordering': ['source_sor', 'sor_id'],
                'unique_together': {('source_sor', 'sor_id')},
            },
        ),
        migrations.CreateModel(
            name='SorName',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('prefix', models.CharField(blank=True, max_length=20)),
                ('given', models.CharField(max_length=100)),
                ('middle', models.CharField(blank=True, max_length=100)),
                ('family', models.CharField(blank=True, max_length=100)),
                ('suffix', models.CharField(blank=True, max_length=20)),
                ('name_type', models.ForeignKey(blank=True, limit_choices_to={'data_type': 'NAME'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('sor_person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='names', to='sor.sorperson')),
            ],
            options={
                'db_table': 'sor_name',
                'ordering': ['pk'],
            },
        ),
        migrations.CreateModel(
            name='SorRole',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('start_date', models.DateField(help_text='Date this record becomes effective')),
                ('end_date', models.DateField(blank=True, help_text='Date this record ends. NULL = open ended', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('sor_id', models.CharField(help_text='Role id inside the feeding system', max_length=100)),
                ('source_sor_identifier', models.CharField(help_text='Feeding system that reported this role', max_length=50)),
                ('percentage', models.PositiveSmallIntegerField(default=100, help_text='Percentage of time (0-100)', validators=[django.core.validators.MaxValueValidator(100)])),
                ('person_status', models.ForeignKey(limit_choices_to={'data_type': 'STATUS'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('role_info', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='sor_roles', to='reference.roleinfo')),
                ('sor_person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='roles', to='sor.sorperson')),
                ('termination_reason', models.ForeignKey(blank=True, limit_choices_to={'data_type': 'TERMINATION'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
            ],
            options={
                'db_table': 'sor_role',
                'ordering': ['-start_date'],
                'unique_together': {('sor_person', 'sor_id')},
            },
        ),
        migrations.CreateModel(
            name='SorSponsor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sponsor_id', models.BigIntegerField()),
                ('sor_role', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='sponsor', to='sor.sorrole')),
                ('sponsor_type', models.ForeignKey(limit_choices_to={'data_type': 'SPONSOR'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
            ],
            options={
                'db_table': 'sor_sponsor',
            },
        ),
        migrations.CreateModel(
            name='SorAddress',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('line1', models.CharField(blank=True, max_length=100)),
                ('line2', models.CharField(blank=True, max_length=100)),
                ('line3', models.CharField(blank=True, max_length=100)),
                ('city', models.CharField(max_length=100)),
                ('postal_code', models.CharField(max_length=9)),
                ('address_type', models.ForeignKey(limit_choices_to={'data_type': 'ADDRESS'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('country', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.country')),
                ('region', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.region')),
                ('sor_role', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='addresses', to='sor.sorrole')),
            ],
            options={
                'db_table': 'sor_address',
                'ordering': ['pk'],
            },
        ),
        migrations.CreateModel(
            name='SorPhone',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('country_code', models.CharField(blank=True, max_length=5)),
                ('area_code', models.CharField(blank=True, max_length=5)),
                ('number', models.CharField(max_length=10)),
                ('extension', models.CharField(blank=True, max_length=5)),
                ('address_type', models.ForeignKey(limit_choices_to={'data_type': 'ADDRESS'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('phone_type', models.ForeignKey(limit_choices_to={'data_type': 'PHONE'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('sor_role', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='phones', to='sor.sorrole')),
            ],
            options={
                'db_table': 'sor_phone',
                'ordering': ['pk'],
            },
        ),
        migrations.CreateModel(
            name='SorEmailAddress',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('address', models.EmailField(max_length=100)),
                ('address_type', models.ForeignKey(limit_choices_to={'data_type': 'EMAIL'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
                ('sor_role', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='email_addresses', to='sor.sorrole')),
            ],
            options={
                'db_table': 'sor_email_address',
                'ordering': ['pk'],
            },
        ),
        migrations.CreateModel(
            name='SorUrl',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('url', models.URLField(max_length=500)),
                ('sor_role', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='urls', to='sor.sorrole')),
                ('url_type', models.ForeignKey(limit_choices_to={'data_type': 'URL'}, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='reference.type')),
            ],
            options={
                'db_table': 'sor_url',
                'ordering': ['pk'],
            },
        ),
    ]
