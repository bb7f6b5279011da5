import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.dispatch import receiver

logger = logging.getLogger('django')


def _ip(request):
    return request.META.get('REMOTE_ADDR') if request is not None else None


@receiver(user_logged_in)
def log_user_login(sender, request, user, **kwargs):
    logger.info(f"LOGIN SUCESSO: Utilizador '{user.username}' entrou no sistema. (IP: {_ip(request)})")


@receiver(user_logged_out)
def log_user_logout(sender, request, user, **kwargs):
    if user:
        logger.info(f"LOGOUT: Utilizador '{user.username}' saiu do sistema.")


@receiver(user_login_failed)
def log_user_login_failed(sender, credentials, request=None, **kwargs):
    username = credentials.get('username', 'desconhecido')
    logger.warning(f"LOGIN FALHOU: Tentativa falhada para utilizador '{username}'. (IP: {_ip(request)})")
