from django.apps import AppConfig


class LoginConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'login'
    verbose_name = 'Autenticação'

    def ready(self):
        # Registra os receptores dos sinais de login/logout
        import login.signals  # noqa: F401
