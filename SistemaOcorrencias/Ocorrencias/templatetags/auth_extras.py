from django import template

from Ocorrencias.permissions import has_exclusao_access, has_relatorios_access

register = template.Library()


@register.filter(name='has_relatorios_access')
def relatorios_access(user):
    """Verifica se o usuário pode abrir os relatórios (RPI, semanal, cartoriais)."""
    return has_relatorios_access(user)


@register.filter(name='has_exclusao_access')
def exclusao_access(user):
    return has_exclusao_access(user)
