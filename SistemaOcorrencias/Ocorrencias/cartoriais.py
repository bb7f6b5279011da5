# SistemaOcorrencias/Ocorrencias/cartoriais.py

from .schemas import Celula, Documento, LinhaTabela, Paragrafo, Tabela, Trecho
from .utils import como_datetime, obter_campo

TAMANHO_FONTE = 9
TEXTO_FOTO = "ESPAÇO PARA INSERIR FOTO"


def rotulo_selecao(registro):
    """Texto do registro na lista de seleção: 'FATO - CIDADE (dd/mm/aaaa)'."""
    data_hora = como_datetime(obter_campo(registro, 'data_hora'))
    data = f"{data_hora:%d/%m/%Y}" if data_hora else "-"
    return f"{obter_campo(registro, 'fato', '')} - {obter_campo(registro, 'cidade', '')} ({data})".upper()


def _campo(rotulo, valor="", col_span=1, largura=None):
    trechos = [Trecho(texto=rotulo, negrito=True, tamanho=TAMANHO_FONTE)]
    if valor:
        trechos.append(Trecho(texto=str(valor).upper(), italico=True, tamanho=TAMANHO_FONTE))
    return Celula(
        paragrafos=[Paragrafo(trechos=trechos)],
        col_span=col_span,
        largura=largura,
        tipo_largura='pct',
    )


def tabela_envolvido(envolvido):
    """
    Ficha de identificação de um envolvido: 8 linhas x 3 colunas, com o
    espaço da foto ocupando as 5 primeiras linhas da primeira coluna.
    Só o número do documento do tipo informado é preenchido (RG ou CPF).
    """
    documento_tipo = str(obter_campo(envolvido, 'documento_tipo', '')).upper()
    documento_numero = obter_campo(envolvido, 'documento_numero', '')
    rg = documento_numero if documento_tipo == "RG" else ""
    cpf = documento_numero if documento_tipo == "CPF" else ""

    foto = Celula(
        paragrafos=[Paragrafo(
            trechos=[Trecho(texto=TEXTO_FOTO, italico=True, tamanho=TAMANHO_FONTE)],
            alinhamento='centro',
        )],
        row_span=5,
        largura=25,
        tipo_largura='pct',
        centralizar_vertical=True,
    )

    linhas = [
        [foto, _campo("NOME: ", obter_campo(envolvido, 'nome', ''), largura=50), _campo("RG: ", rg, largura=25)],
        [_campo("ALCUNHA: "), _campo("CPF: ", cpf)],
        [_campo("ORCRIM: ", obter_campo(envolvido, 'orcrim', '')), _campo("DN: ", obter_campo(envolvido, 'data_nascimento', ''))],
        [_campo("SITUAÇÃO: "), _campo("CD: ")],
        [_campo("FILIAÇÃO: ", col_span=2)],
        [_campo("END.: ", col_span=3)],
        [_campo("OC.: ", obter_campo(envolvido, 'antecedentes', ''), col_span=3)],
        [_campo("OBS.: ", col_span=3)],
    ]
    return Tabela(linhas=[LinhaTabela(celulas=celulas) for celulas in linhas], colunas=3)


def gerar_tabelas_cartoriais(registro):
    return [tabela_envolvido(e) for e in obter_campo(registro, 'envolvidos', [])]


def gerar_documento_cartoriais(registro):
    blocos = []
    for tabela in gerar_tabelas_cartoriais(registro):
        blocos.append(tabela)
        blocos.append(Paragrafo())
    return Documento(blocos=blocos, tamanho_fonte=TAMANHO_FONTE)


def nome_arquivo_cartoriais(registro):
    return f"Tabelas_Cartoriais_{obter_campo(registro, 'fato', '')}.docx"
