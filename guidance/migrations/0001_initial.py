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
            name='TarotReading',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('spread', models.CharField(choices=[('single', 'Single Card'), ('three-card', 'Three Card Spread'), ('career-cross', 'Career Cross')], max_length=32)),
                ('reading_date', models.DateField()),
                ('cards', models.JSONField(default=list)),
                ('interpretation', models.TextField()),
                ('action_items', models.JSONField(default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tarot_readings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Tarot Reading',
                'verbose_name_plural': 'Tarot Readings',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
