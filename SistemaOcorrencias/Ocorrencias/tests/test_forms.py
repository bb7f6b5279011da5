from datetime import datetime

import pytest
from django import forms
from django.utils import timezone

from Ocorrencias.forms import (
    EnvolvidoForm,
    EnvolvidoFormSet,
    OcorrenciaForm,
    envolvidos_do_formset,
    interpretar_data_hora,
)


def dados_formulario(**kwargs):
    dados = {
        'fato': 'ROUBO A PEDESTRE',
        'fato_complementar': '',
        'unidade': '41º BPM',
        'cidade': 'Gramado',
        'data_hora': '151630JAN25',
        'local_rua': 'Rua Coberta',
        'local_numero': '100',
        'local_bairro': 'Centro',
        'oficial': 'Ten Souza',
        'resumo': 'Vítima abordada.',
        'motivacao': '',
        'material_texto': 'Faca\n\n  Celular  \n',
    }
    dados.update(kwargs)
    return dados


class TestInterpretarDataHora:

    def test_grupo_data_hora_no_horario_local(self):
        dt = interpretar_data_hora('151630jan25')
        assert timezone.is_aware(dt)
        assert timezone.localtime(dt).replace(tzinfo=None) == datetime(2025, 1, 15, 16, 30)

    def test_datetime_local(self):
        dt = interpretar_data_hora('2025-01-15T16:30')
        assert timezone.localtime(dt).replace(tzinfo=None) == datetime(2025, 1, 15, 16, 30)

    def test_iso_com_fuso_e_preservado(self):
        dt = interpretar_data_hora('2025-01-15T19:30:00Z')
        assert timezone.localtime(dt).replace(tzinfo=None) == datetime(2025, 1, 15, 16, 30)

    @pytest.mark.parametrize("valor", ['', None, '310230FEV25', 'ontem', '2025-13-01T10:00', 20250115, ['151630JAN25']])
    def test_valor_invalido(self, valor):
        with pytest.raises(forms.ValidationError):
            interpretar_data_hora(valor)


class TestEnvolvidoForm:

    def test_aplica_mascara_de_cpf(self):
        form = EnvolvidoForm(data={
            'role': 'AUTOR',
            'nome': 'Fulano de Tal',
            'documento_tipo': 'CPF',
            'documento_numero': '12345678901',
            'data_nascimento': '2000-05-20',
        })
        assert form.is_valid(), form.errors
        assert form.cleaned_data['documento_numero'] == '123.456.789-01'
        assert form.envolvido.para_banco() == {
            'role': 'AUTOR',
            'nome': 'Fulano de Tal',
            'documento_tipo': 'CPF',
            'documento_numero': '123.456.789-01',
            'data_nascimento': '2000-05-20',
            'antecedentes': 'Nada consta',
            'orcrim': 'Nada consta',
        }

    def test_nome_obrigatorio(self):
        form = EnvolvidoForm(data={'role': 'VÍTIMA', 'nome': '', 'documento_tipo': 'RG'})
        assert not form.is_valid()
        assert 'nome' in form.errors


def test_formset_ignora_envolvidos_excluidos():
    formset = EnvolvidoFormSet(data={
        'envolvidos-TOTAL_FORMS': '2',
        'envolvidos-INITIAL_FORMS': '0',
        'envolvidos-0-role': 'VÍTIMA',
        'envolvidos-0-nome': 'Maria',
        'envolvidos-0-documento_tipo': 'RG',
        'envolvidos-1-role': 'AUTOR',
        'envolvidos-1-nome': 'José',
        'envolvidos-1-documento_tipo': 'RG',
        'envolvidos-1-DELETE': 'on',
    }, prefix='envolvidos')
    assert formset.is_valid()
    assert [e['nome'] for e in envolvidos_do_formset(formset)] == ['Maria']


@pytest.mark.django_db
class TestOcorrenciaForm:

    def test_salva_ocorrencia(self):
        form = OcorrenciaForm(data=dados_formulario())
        assert form.is_valid(), form.errors
        ocorrencia = form.save()
        assert ocorrencia.pk
        assert ocorrencia.material == ['Faca', 'Celular']
        assert ocorrencia.fato_complementar is None
        assert ocorrencia.motivacao == 'Desconhecida'
        assert timezone.localtime(ocorrencia.data_hora).strftime('%d%H%M') == '151630'

    def test_cidade_de_outra_unidade(self):
        form = OcorrenciaForm(data=dados_formulario(unidade='2ª Cia Ind'))
        assert not form.is_valid()
        assert 'cidade' in form.errors

    def test_data_hora_invalida(self):
        form = OcorrenciaForm(data=dados_formulario(data_hora='999999XYZ99'))
        assert not form.is_valid()
        assert 'data_hora' in form.errors

    def test_valores_iniciais_da_edicao(self, criar_ocorrencia):
        data_hora = timezone.make_aware(datetime(2025, 1, 15, 16, 30))
        ocorrencia = criar_ocorrencia(data_hora=data_hora, material=['Faca', 'Celular'])
        form = OcorrenciaForm(instance=ocorrencia)
        assert form.initial['data_hora'] == '2025-01-15T16:30'
        assert form.initial['material_texto'] == 'Faca\nCelular'
