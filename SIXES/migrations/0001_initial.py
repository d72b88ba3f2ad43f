from decimal import Decimal

import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Games',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('CreateDate', models.DateTimeField(auto_now_add=True)),
                ('Location', models.CharField(max_length=256)),
                ('PlayDate', models.DateField()),
                ('BetUnit', models.DecimalField(decimal_places=2, default=Decimal('1.00'), max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('StartingHole', models.IntegerField(default=1, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(18)])),
                ('CurrentHole', models.IntegerField(default=1, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(18)])),
                ('IsCompleted', models.BooleanField(default=False)),
                ('CompletedAt', models.DateTimeField(blank=True, null=True)),
                ('MaxScore', models.IntegerField(default=10)),
            ],
            options={
                'db_table': 'Games',
            },
        ),
        migrations.CreateModel(
            name='Players',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('Name', models.CharField(max_length=64)),
                ('PlaysIndividual', models.BooleanField(default=True)),
                ('GameID', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='players', to='SIXES.games')),
            ],
            options={
                'db_table': 'Players',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Scores',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('HoleNumber', models.IntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(18)])),
                ('Score', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('Par', models.IntegerField(default=4, validators=[django.core.validators.MinValueValidator(3), django.core.validators.MaxValueValidator(5)])),
                ('GameID', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='SIXES.games')),
                ('PID', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='SIXES.players')),
            ],
            options={
                'db_table': 'Scores',
                'unique_together': {('GameID', 'PID', 'HoleNumber')},
            },
        ),
        migrations.CreateModel(
            name='TeamPairing',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('Section', models.IntegerField(choices=[(1, 'Section 1'), (2, 'Section 2'), (3, 'Section 3')])),
                ('GameID', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pairings', to='SIXES.games')),
                ('Team1PID1', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='SIXES.players')),
                ('Team1PID2', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='SIXES.players')),
                ('Team2PID1', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='SIXES.players')),
                ('Team2PID2', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='SIXES.players')),
            ],
            options={
                'db_table': 'TeamPairing',
                'unique_together': {('GameID', 'Section')},
            },
        ),
    ]
