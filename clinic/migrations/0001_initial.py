import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(3, message='Name must be at least 3 characters')])),
                ('city', models.CharField(choices=[('Delhi', 'Delhi'), ('Noida', 'Noida'), ('Faridabad', 'Faridabad')], max_length=20)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(10, message='Phone number must be at least 10 digits')])),
                ('speciality', models.CharField(choices=[('Orthopaedic', 'Orthopaedic'), ('Gynecology', 'Gynecology'), ('Dermatology', 'Dermatology'), ('ENT', 'ENT')], max_length=32)),
            ],
            options={
                'ordering': ['id'],
                'indexes': [models.Index(fields=['city', 'speciality'], name='doctor_city_speciality_idx')],
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(3, message='Name must be at least 3 characters')])),
                ('city', models.CharField(max_length=20)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(10, message='Phone number must be at least 10 digits')])),
                ('symptom', models.CharField(choices=[('Arthritis', 'Arthritis'), ('Back Pain', 'Back Pain'), ('Tissue injuries', 'Tissue injuries'), ('Dysmenorrhea', 'Dysmenorrhea'), ('Skin infection', 'Skin infection'), ('skin burn', 'skin burn'), ('Ear pain', 'Ear pain')], max_length=32)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
