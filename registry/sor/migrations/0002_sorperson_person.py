import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('person', '0001_initial'),
        ('sor', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='sorperson',
            name='person',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sor_records', to='person.person'),
        ),
    ]
