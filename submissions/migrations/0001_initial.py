from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContactMessage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('first_name', models.CharField(max_length=30)),
                ('last_name', models.CharField(max_length=30)),
                ('gender', models.CharField(choices=[('male', 'Male'), ('female', 'Female')], max_length=10)),
                ('mobile', models.CharField(max_length=13)),
                ('dob', models.DateField()),
                ('email', models.EmailField(max_length=254)),
                ('language', models.CharField(choices=[('arabic', 'Arabic'), ('english', 'English')], max_length=20)),
                ('message', models.TextField()),
            ],
            options={
                'db_table': 'contact_messages',
                'ordering': ['-id'],
            },
        ),
        migrations.CreateModel(
            name='ProjectIdea',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('team_name', models.CharField(max_length=50)),
                ('team_size', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(10)])),
                ('rep_name', models.CharField(max_length=50)),
                ('rep_id', models.CharField(max_length=7)),
                ('rep_email', models.EmailField(max_length=254)),
                ('other_members', models.TextField(blank=True, default='')),
                ('course_code', models.CharField(max_length=20)),
                ('category', models.CharField(choices=[('cybersecurity', 'Cybersecurity'), ('cs', 'Computer Science'), ('se', 'Software Engineering'), ('is', 'Information Systems'), ('ai', 'Artificial Intelligence'), ('data', 'Data Science')], max_length=20)),
                ('project_type', models.CharField(choices=[('group', 'Group'), ('solo', 'Solo')], max_length=10)),
                ('project_name', models.CharField(max_length=60)),
                ('description', models.TextField()),
                ('tools', models.TextField(blank=True, default='')),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['-id'],
            },
        ),
    ]
