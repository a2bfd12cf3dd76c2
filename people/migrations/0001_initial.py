from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Gender',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('gender', models.CharField(help_text="Gender label, e.g. 'male'", max_length=50, unique=True)),
            ],
            options={
                'db_table': 'genders',
                'ordering': ['gender'],
            },
        ),
        migrations.CreateModel(
            name='Nationality',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nationality', models.CharField(help_text="Country code, e.g. 'US'", max_length=10, unique=True)),
            ],
            options={
                'db_table': 'nationalities',
                'verbose_name_plural': 'nationalities',
                'ordering': ['nationality'],
            },
        ),
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('surname', models.CharField(max_length=100)),
                ('patronymic', models.CharField(blank=True, max_length=100, null=True)),
                ('age', models.PositiveIntegerField()),
                ('gender', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='people', to='people.gender')),
                ('nationality', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='people', to='people.nationality')),
            ],
            options={
                'db_table': 'people',
                'ordering': ['id'],
            },
        ),
    ]
