# SistemaOcorrencias/Ocorrencias/relatorio_rpi.py

import logging
import re
from datetime import timedelta

from django.utils import timezone

from .constantes import (
    JANELA_RPI_HORAS,
    NADA_CONSTA,
    ORDEM_UNIDADES_RPI,
    SEM_REGISTRO_RPI,
    UNIDADE_RPI_POR_CIDADE,
)
from .schemas import Documento, Paragrafo, Trecho
from .utils import (
    calcular_idade,
    capitalizar_frase,
    como_datetime,
    data_de_referencia,
    dentro_da_janela,
    formatar_qualificacao,
    obter_campo,
)

logger = logging.getLogger(__name__)

TITULO_OCORRENCIA_REGEX = re.compile(r'^\d{2}/\d{2}/\d{4} às \d{2}h\d{2}min - .*')
QUALIFICACAO_REGEX = re.compile(r'^(Vítima|Autor|Testemunha|Preso|Menor apreendido|Condutor|Atendido|Suspeito):')
ROTULOS_DESTACADOS = ("Antecedentes:", "Orcrim:", "Material apreendido:")


def filtrar_ultimas_24h(registros, agora=None):
    agora = agora or timezone.now()
    inicio = agora - timedelta(hours=JANELA_RPI_HORAS)
    return [r for r in registros if dentro_da_janela(obter_campo(r, 'data_hora'), inicio, agora)]


def agrupar_por_unidade(registros):
    """
    Distribui os registros pelas unidades do RPI, na ordem fixa das seções.
    Registros de cidades sem unidade mapeada ficam de fora do relatório.
    """
    grupos = {unidade: [] for unidade in ORDEM_UNIDADES_RPI}
    for registro in registros:
        cidade = obter_campo(registro, 'cidade', '')
        unidade = UNIDADE_RPI_POR_CIDADE.get(cidade)
        if unidade is None:
            logger.warning(
                f"Ocorrência {obter_campo(registro, 'id', '?')} ignorada no RPI: "
                f"cidade '{cidade}' sem unidade mapeada."
            )
            continue
        grupos[unidade].append(registro)
    return grupos


def _linhas_ocorrencia(registro, hoje):
    data_hora = como_datetime(obter_campo(registro, 'data_hora'))
    fato = str(obter_campo(registro, 'fato', '')).upper()
    fato_complementar = obter_campo(registro, 'fato_complementar')
    if fato_complementar:
        fato += f" / {fato_complementar.upper()}"

    rua = str(obter_campo(registro, 'local_rua', '')).lower()
    numero = str(obter_campo(registro, 'local_numero', '')).lower()
    bairro = str(obter_campo(registro, 'local_bairro', '')).lower()
    cidade = obter_campo(registro, 'cidade', '')
    resumo = capitalizar_frase(obter_campo(registro, 'resumo', ''))

    linhas = [
        f"{data_hora:%d/%m/%Y} às {data_hora:%H}h{data_hora:%M}min - {fato}",
        f"Na {rua}, nº {numero}, bairro {bairro}, em {cidade}, {resumo}",
        "",
    ]

    material = [m for m in obter_campo(registro, 'material', []) if m]
    if material:
        linhas.append("Material apreendido:")
        linhas.extend(material)
        linhas.append("")

    for envolvido in obter_campo(registro, 'envolvidos', []):
        qualificacao = formatar_qualificacao(obter_campo(envolvido, 'role', ''))
        nome = str(obter_campo(envolvido, 'nome', '')).lower()
        documento_tipo = obter_campo(envolvido, 'documento_tipo', '')
        documento_numero = obter_campo(envolvido, 'documento_numero', '')
        idade = calcular_idade(obter_campo(envolvido, 'data_nascimento'), hoje=hoje)
        antecedentes = obter_campo(envolvido, 'antecedentes') or NADA_CONSTA
        orcrim = obter_campo(envolvido, 'orcrim') or NADA_CONSTA

        linhas.append(f"{qualificacao}: {nome}; {documento_tipo}: {documento_numero} ; {idade} anos")
        linhas.append(f"Antecedentes: {capitalizar_frase(antecedentes.lower())}")
        linhas.append(f"Orcrim: {capitalizar_frase(orcrim.lower())}")
        linhas.append("")

    return linhas


def gerar_texto_rpi(registros, agora=None):
    """
    Texto do RPI das últimas 24 horas, agrupado por unidade.
    Unidades sem registro recebem 'SN.'.
    """
    agora = agora or timezone.now()
    hoje = data_de_referencia(agora)
    grupos = agrupar_por_unidade(filtrar_ultimas_24h(registros, agora=agora))

    linhas = []
    for unidade in ORDEM_UNIDADES_RPI:
        linhas.append(unidade)
        registros_unidade = grupos[unidade]
        if not registros_unidade:
            linhas.extend([SEM_REGISTRO_RPI, ""])
            continue
        for indice, registro in enumerate(registros_unidade):
            linhas.extend(_linhas_ocorrencia(registro, hoje))
            if indice < len(registros_unidade) - 1:
                linhas.append("")

    return "\n".join(linhas).strip()


def classificar_linha(linha):
    """
    Converte uma linha do texto do RPI num parágrafo com os destaques:
    cabeçalhos de unidade, 'SN.' e títulos de ocorrência ficam inteiros em
    negrito; qualificações e rótulos têm só o trecho até os dois pontos em negrito.
    """
    if linha in ORDEM_UNIDADES_RPI or linha == SEM_REGISTRO_RPI or TITULO_OCORRENCIA_REGEX.match(linha):
        return Paragrafo(trechos=[Trecho(texto=linha, negrito=True)])

    if QUALIFICACAO_REGEX.match(linha) or linha.startswith(ROTULOS_DESTACADOS):
        fim_rotulo = linha.index(":") + 1
        trechos = [Trecho(texto=linha[:fim_rotulo], negrito=True)]
        if linha[fim_rotulo:]:
            trechos.append(Trecho(texto=linha[fim_rotulo:]))
        return Paragrafo(trechos=trechos)

    if not linha:
        return Paragrafo()
    return Paragrafo(trechos=[Trecho(texto=linha)])


def gerar_paragrafos_rpi(texto):
    return [classificar_linha(linha) for linha in texto.split("\n")]


def gerar_documento_rpi(registros, agora=None):
    texto = gerar_texto_rpi(registros, agora=agora)
    paragrafos = gerar_paragrafos_rpi(texto)
    for paragrafo in paragrafos:
        paragrafo.espaco_antes = 0
        paragrafo.espaco_depois = 0
    return Documento(blocos=paragrafos, tamanho_fonte=12)
