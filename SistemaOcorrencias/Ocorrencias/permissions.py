GRUPO_RELATORIOS = "Relatórios"
GRUPO_EXCLUSAO = "Exclusão"


def has_relatorios_access(user):
    """Verifica se o utilizador pertence ao grupo 'Relatórios' ou é um superutilizador."""
    if not user.is_authenticated:
        return False
    return user.groups.filter(name=GRUPO_RELATORIOS).exists() or user.is_superuser


def has_exclusao_access(user):
    """Verifica se o utilizador pode apagar ocorrências (grupo 'Exclusão' ou permissão de exclusão)."""
    if not user.is_authenticated:
        return False
    return user.groups.filter(name=GRUPO_EXCLUSAO).exists() or user.has_perm('Ocorrencias.delete_ocorrencia')
