import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='LinkedInConnection',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('linkedin_id', models.CharField(blank=True, max_length=128)),
                ('access_token', models.TextField()),
                ('profile_data', models.JSONField(blank=True, default=dict)),
                ('demo', models.BooleanField(default=False)),
                ('connected_at', models.DateTimeField(auto_now_add=True)),
                ('last_synced_at', models.DateTimeField(blank=True, null=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='linkedin_connection', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'LinkedIn Connection',
                'verbose_name_plural': 'LinkedIn Connections',
            },
        ),
    ]
