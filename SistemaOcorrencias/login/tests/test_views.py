import logging

import pytest
from django.contrib.auth.models import User
from django.urls import reverse

pytestmark = pytest.mark.django_db


@pytest.fixture
def usuario():
    return User.objects.create_user(username='operador', password='senha-forte-123')


def test_pagina_de_login(client):
    response = client.get(reverse('login:login'))
    assert response.status_code == 200
    assert 'form' in response.context


def test_login_redireciona_para_menu(client, usuario, caplog):
    with caplog.at_level(logging.INFO, logger='django'):
        response = client.post(reverse('login:login'), {'username': 'operador', 'password': 'senha-forte-123'})
    assert response.status_code == 302
    assert response.url == reverse('Ocorrencias:index')
    assert "LOGIN SUCESSO: Utilizador 'operador'" in caplog.text


def test_login_respeita_next(client, usuario):
    destino = reverse('Ocorrencias:nova')
    response = client.post(
        f"{reverse('login:login')}?next={destino}",
        {'username': 'operador', 'password': 'senha-forte-123'},
    )
    assert response.url == destino


def test_login_ignora_next_externo(client, usuario):
    response = client.post(reverse('login:login'), {
        'username': 'operador',
        'password': 'senha-forte-123',
        'next': 'https://exemplo.com/',
    })
    assert response.url == reverse('Ocorrencias:index')


def test_login_invalido(client, usuario, caplog):
    with caplog.at_level(logging.WARNING, logger='django'):
        response = client.post(reverse('login:login'), {'username': 'operador', 'password': 'errada'})
    assert response.status_code == 200
    assert not response.wsgi_request.user.is_authenticated
    assert "LOGIN FALHOU" in caplog.text


def test_usuario_logado_vai_para_menu(client, usuario):
    client.force_login(usuario)
    response = client.get(reverse('login:login'))
    assert response.url == reverse('Ocorrencias:index')


def test_logout(client, usuario):
    client.force_login(usuario)
    response = client.get(reverse('login:logout'))
    assert response.url == reverse('login:login')
    assert client.get(reverse('Ocorrencias:index')).status_code == 302
