from datetime import date

import pytest

from Ocorrencias.release import formatar_release

HOJE = date(2025, 1, 15)

MARCADORES = [
    "[FATO]", "[CIDADE]", "[UNIDADE]", "[DATA/HORA]", "[LOCAL]", "[ENVOLVIDOS]",
    "[MOTIVAÇÃO]", "[MATERIAL]", "[OFICIAL]", "[RESUMO]",
]


@pytest.mark.parametrize("registro", [{}, None])
def test_registro_vazio_usa_marcadores(registro):
    texto = formatar_release(registro)
    for marcador in MARCADORES:
        assert marcador in texto
    assert "PRELIMINAR" not in texto
    assert "OCORRÊNCIA EM ANDAMENTO" not in texto


def test_registro_vazio_preliminar():
    texto = formatar_release({}, preliminar=True)
    assert texto.startswith("*PRELIMINAR*\n\n*FATO*\n[FATO]")
    assert texto.endswith("*RESUMO DO FATO:*\n[RESUMO]\n\n*OCORRÊNCIA EM ANDAMENTO*")


def test_release_completo(registro):
    esperado = (
        "*FATO*\n"
        "ROUBO A PEDESTRE\n"
        "\n"
        "*CIDADE - CRPM HORTÊNSIAS / UNIDADE*\n"
        "Gramado - CRPM HORTÊNSIAS / 41º BPM\n"
        "\n"
        "*DATA/HORA:*\n"
        "151000JAN25\n"
        "\n"
        "*LOCAL:*\n"
        "rua coberta, nº 100, bairro centro\n"
        "\n"
        "*ENVOLVIDOS:*\n"
        "*Vítima:* JOÃO DA SILVA\n"
        "*RG:* 1234567890\n"
        "*Idade:* 35 anos\n"
        "*Antecedentes:* Nada consta\n"
        "*Orcrim:* Nada consta\n"
        "\n"
        "*MOTIVAÇÃO:*\n"
        "Desconhecida\n"
        "\n"
        "*MATERIAL APREENDIDO:*\n"
        "Nenhum\n"
        "\n"
        "*OFICIAL:*\n"
        "Ten Souza\n"
        "\n"
        "*RESUMO DO FATO:*\n"
        "Vítima abordada por dois indivíduos. Celular subtraído."
    )
    assert formatar_release(registro, hoje=HOJE) == esperado


def test_fato_complementar_em_linha_propria(registro):
    registro['fato_complementar'] = 'lesão corporal'
    assert "*FATO*\nROUBO A PEDESTRE\nLESÃO CORPORAL\n\n" in formatar_release(registro, hoje=HOJE)


def test_material_listado(registro):
    registro['material'] = ['Faca', '', '  ', 'Celular Samsung']
    texto = formatar_release(registro, hoje=HOJE)
    assert "*MATERIAL APREENDIDO:*\n- Faca\n- Celular Samsung\n\n" in texto


def test_envolvido_incompleto(registro):
    registro['envolvidos'] = [{'role': 'AUTOR'}]
    texto = formatar_release(registro, hoje=HOJE)
    assert "*Autor:* [NOME]\n*DOCUMENTO:* [DOCUMENTO]\n*Idade:* N/A\n" in texto
    assert "*Antecedentes:* Nada consta\n*Orcrim:* Nada consta" in texto


def test_varios_envolvidos_separados(registro, envolvido):
    cpf = dict(envolvido, role='MENOR APREENDIDO', documento_tipo='CPF', documento_numero='123.456.789-01',
               antecedentes='furto. roubo', data_nascimento='2009-06-01')
    registro['envolvidos'].append(cpf)
    texto = formatar_release(registro, hoje=HOJE)
    assert "*Orcrim:* Nada consta\n\n*Menor apreendido:* JOÃO DA SILVA\n*CPF:* 123.456.789-01\n*Idade:* 15 anos" in texto
    assert "*Antecedentes:* Furto. Roubo" in texto


def test_local_parcial(registro):
    registro['local_numero'] = ''
    registro['local_bairro'] = None
    assert "*LOCAL:*\nrua coberta, nº [NÚMERO], bairro [BAIRRO]" in formatar_release(registro, hoje=HOJE)


def test_data_invalida_vira_marcador(registro):
    registro['data_hora'] = "amanhã"
    assert "*DATA/HORA:*\n[DATA/HORA]" in formatar_release(registro)


def test_release_de_ocorrencia_salva(criar_ocorrencia):
    ocorrencia = criar_ocorrencia(fato='furto em veículo', material=['Chave de fenda'])
    texto = formatar_release(ocorrencia, preliminar=True)
    assert texto.startswith("*PRELIMINAR*\n\n*FATO*\nFURTO EM VEÍCULO")
    assert "- Chave de fenda" in texto
    assert "*MOTIVAÇÃO:*\nDesconhecida" in texto
