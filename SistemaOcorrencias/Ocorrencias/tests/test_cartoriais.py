from Ocorrencias.cartoriais import (
    gerar_documento_cartoriais,
    gerar_tabelas_cartoriais,
    nome_arquivo_cartoriais,
    rotulo_selecao,
    tabela_envolvido,
)
from Ocorrencias.schemas import Paragrafo, Tabela


def _celulas(tabela):
    return {c.paragrafos[0].trechos[0].texto: c for linha in tabela.linhas for c in linha.celulas}


def test_rotulo_selecao(registro):
    registro['fato'] = 'Furto de veículo'
    assert rotulo_selecao(registro) == "FURTO DE VEÍCULO - GRAMADO (15/01/2025)"


def test_tabela_tem_oito_linhas_e_foto(envolvido):
    tabela = tabela_envolvido(envolvido)
    assert tabela.colunas == 3
    assert len(tabela.linhas) == 8

    foto = tabela.linhas[0].celulas[0]
    assert foto.row_span == 5
    assert foto.centralizar_vertical
    assert foto.texto == "ESPAÇO PARA INSERIR FOTO"

    celulas = _celulas(tabela)
    assert celulas["FILIAÇÃO: "].col_span == 2
    assert celulas["END.: "].col_span == 3
    assert celulas["OC.: "].col_span == 3
    assert celulas["OBS.: "].col_span == 3


def test_documento_rg(envolvido):
    celulas = _celulas(tabela_envolvido(envolvido))
    assert celulas["RG: "].texto == "RG: 1234567890"
    assert celulas["CPF: "].texto == "CPF: "
    assert celulas["NOME: "].texto == "NOME: JOÃO DA SILVA"
    assert celulas["DN: "].texto == "DN: 1990-01-10"
    assert celulas["OC.: "].texto == "OC.: NADA CONSTA"


def test_documento_cpf(envolvido):
    envolvido.update(documento_tipo='CPF', documento_numero='123.456.789-01', nome='maria souza')
    celulas = _celulas(tabela_envolvido(envolvido))
    assert celulas["RG: "].texto == "RG: "
    assert celulas["CPF: "].texto == "CPF: 123.456.789-01"
    nome = celulas["NOME: "].paragrafos[0].trechos
    assert nome[0].negrito and not nome[0].italico
    assert nome[1].italico and nome[1].texto == "MARIA SOUZA"


def test_uma_tabela_por_envolvido(registro, envolvido):
    registro['envolvidos'] = [envolvido, dict(envolvido, nome='OUTRO')]
    assert len(gerar_tabelas_cartoriais(registro)) == 2

    documento = gerar_documento_cartoriais(registro)
    assert [type(b) for b in documento.blocos] == [Tabela, Paragrafo, Tabela, Paragrafo]
    assert documento.tamanho_fonte == 9


def test_sem_envolvidos(registro):
    registro['envolvidos'] = []
    assert gerar_tabelas_cartoriais(registro) == []


def test_nome_arquivo(registro):
    assert nome_arquivo_cartoriais(registro) == "Tabelas_Cartoriais_ROUBO A PEDESTRE.docx"
