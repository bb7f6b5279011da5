from django.apps import AppConfig


class OcorrenciasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'Ocorrencias'
    verbose_name = 'Ocorrências'
