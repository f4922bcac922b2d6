from django.db import migrations


def create_about(apps, schema_editor):
    About = apps.get_model('portfolio', 'About')
    About.objects.get_or_create(id=1, defaults={'contact_info': {}})


class Migration(migrations.Migration):

    dependencies = [
        ('portfolio', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_about, migrations.RunPython.noop),
    ]
