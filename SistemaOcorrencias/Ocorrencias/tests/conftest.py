from datetime import datetime, timedelta

import pytest
from django.contrib.auth.models import Group, User
from django.utils import timezone

from Ocorrencias.models import Ocorrencia
from Ocorrencias.permissions import GRUPO_EXCLUSAO, GRUPO_RELATORIOS


@pytest.fixture
def agora():
    return timezone.make_aware(datetime(2025, 1, 15, 12, 0))


@pytest.fixture
def envolvido():
    return {
        'role': 'VÍTIMA',
        'nome': 'JOÃO DA SILVA',
        'documento_tipo': 'RG',
        'documento_numero': '1234567890',
        'data_nascimento': '1990-01-10',
        'antecedentes': 'Nada consta',
        'orcrim': 'Nada consta',
    }


@pytest.fixture
def registro(agora, envolvido):
    """Ocorrência em forma de dicionário (como um rascunho do formulário)."""
    return {
        'id': 1,
        'fato': 'ROUBO A PEDESTRE',
        'fato_complementar': None,
        'unidade': '41º BPM',
        'cidade': 'Gramado',
        'data_hora': agora - timedelta(hours=2),
        'local_rua': 'Rua Coberta',
        'local_numero': '100',
        'local_bairro': 'Centro',
        'envolvidos': [envolvido],
        'oficial': 'Ten Souza',
        'material': [],
        'resumo': 'vítima abordada por dois indivíduos. celular subtraído.',
        'motivacao': 'Desconhecida',
    }


@pytest.fixture
def criar_ocorrencia(db, envolvido):
    def _criar(**kwargs):
        dados = {
            'fato': 'ROUBO A PEDESTRE',
            'unidade': '41º BPM',
            'cidade': 'Gramado',
            'data_hora': timezone.now() - timedelta(hours=1),
            'local_rua': 'Rua Coberta',
            'local_numero': '100',
            'local_bairro': 'Centro',
            'envolvidos': [envolvido],
            'oficial': 'Ten Souza',
            'material': [],
            'resumo': 'Vítima abordada por dois indivíduos.',
        }
        dados.update(kwargs)
        return Ocorrencia.objects.create(**dados)
    return _criar


@pytest.fixture
def usuario(db):
    return User.objects.create_user(username='operador', password='senha-forte-123')


@pytest.fixture
def usuario_relatorios(db):
    user = User.objects.create_user(username='relatorios', password='senha-forte-123')
    user.groups.add(Group.objects.get_or_create(name=GRUPO_RELATORIOS)[0])
    return user


@pytest.fixture
def usuario_exclusao(db):
    user = User.objects.create_user(username='exclusao', password='senha-forte-123')
    user.groups.add(Group.objects.get_or_create(name=GRUPO_EXCLUSAO)[0])
    return user


@pytest.fixture
def cliente(client, usuario):
    client.force_login(usuario)
    return client
