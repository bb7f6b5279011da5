from django.contrib.auth.management import create_permissions
from django.db import migrations

GRUPO_RELATORIOS = "Relatórios"
GRUPO_EXCLUSAO = "Exclusão"


def criar_grupos(apps, schema_editor):
    # As permissões padrão só são criadas no post_migrate; garante que já existam aqui.
    for app_config in apps.get_app_configs():
        app_config.models_module = True
        create_permissions(app_config, apps=apps, verbosity=0)
        app_config.models_module = None

    Group = apps.get_model('auth', 'Group')
    Permission = apps.get_model('auth', 'Permission')

    view_perm = Permission.objects.get(codename='view_ocorrencia', content_type__app_label='Ocorrencias')
    delete_perm = Permission.objects.get(codename='delete_ocorrencia', content_type__app_label='Ocorrencias')

    grupos = {
        GRUPO_RELATORIOS: [view_perm],
        GRUPO_EXCLUSAO: [view_perm, delete_perm],
    }
    for nome, permissoes in grupos.items():
        group, _ = Group.objects.get_or_create(name=nome)
        group.permissions.set(permissoes)


def remover_grupos(apps, schema_editor):
    Group = apps.get_model('auth', 'Group')
    Group.objects.filter(name__in=[GRUPO_RELATORIOS, GRUPO_EXCLUSAO]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('Ocorrencias', '0001_initial'),
        ('auth', '0012_alter_user_first_name_max_length'),
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.RunPython(criar_grupos, remover_grupos),
    ]
