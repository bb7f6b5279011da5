# SistemaOcorrencias/Ocorrencias/resumo_semanal.py

from datetime import timedelta

from django.utils import timezone

from .constantes import COLUNAS_RESUMO_SEMANAL, FATOS_SEMANAIS, JANELA_SEMANAL_DIAS, NADA_CONSTA
from .schemas import Celula, Documento, LinhaTabela, Paragrafo, Tabela, Trecho
from .utils import (
    calcular_idade,
    capitalizar_frase,
    classificar_turno,
    como_datetime,
    data_de_referencia,
    dentro_da_janela,
    formatar_nome_proprio,
    formatar_qualificacao,
    obter_campo,
)

SOMBREAMENTO_CABECALHO = "F2F2F2"


def filtrar_semana(registros, agora=None):
    """Registros dos fatos semanais ocorridos nos últimos 7 dias."""
    agora = agora or timezone.now()
    inicio = agora - timedelta(days=JANELA_SEMANAL_DIAS)
    return [
        r for r in registros
        if obter_campo(r, 'fato') in FATOS_SEMANAIS
        and dentro_da_janela(obter_campo(r, 'data_hora'), inicio, agora)
    ]


def agrupar_por_fato(registros):
    grupos = {}
    for fato in FATOS_SEMANAIS:
        do_fato = [r for r in registros if obter_campo(r, 'fato') == fato]
        if do_fato:
            grupos[fato] = do_fato
    return grupos


def titulo_fato(fato, quantidade):
    return f"{fato} - {quantidade} {'REGISTRO' if quantidade == 1 else 'REGISTROS'} NA SEMANA"


def _envolvido_resumo(envolvido, hoje):
    return {
        'qualificacao': formatar_qualificacao(obter_campo(envolvido, 'role', '')),
        'nome': formatar_nome_proprio(obter_campo(envolvido, 'nome', '')),
        'documento_tipo': str(obter_campo(envolvido, 'documento_tipo', '')).upper(),
        'documento_numero': obter_campo(envolvido, 'documento_numero', ''),
        'idade': calcular_idade(obter_campo(envolvido, 'data_nascimento'), hoje=hoje),
        'antecedentes': (obter_campo(envolvido, 'antecedentes') or NADA_CONSTA).lower(),
    }


def _linha_resumo(registro, hoje):
    data_hora = como_datetime(obter_campo(registro, 'data_hora'))
    bairro = str(obter_campo(registro, 'local_bairro', ''))
    cidade = str(obter_campo(registro, 'cidade', ''))
    return {
        'id': obter_campo(registro, 'id'),
        'hora': f"{data_hora:%H:%M}",
        'turno': classificar_turno(data_hora),
        'data': f"{data_hora:%d/%m/%Y}",
        'endereco': f"{obter_campo(registro, 'local_rua', '')}, {obter_campo(registro, 'local_numero', '')}",
        'bairro_cidade': f"{bairro.upper()} / {cidade.upper()}",
        'historico': capitalizar_frase(str(obter_campo(registro, 'resumo', '')).lower()),
        'envolvidos': [_envolvido_resumo(e, hoje) for e in obter_campo(registro, 'envolvidos', [])],
    }


def gerar_resumo_semanal(registros, agora=None):
    """
    Estrutura do resumo semanal: uma seção por fato (na ordem fixa da lista,
    omitindo fatos sem registro), cada uma com as linhas da tabela.
    """
    agora = agora or timezone.now()
    hoje = data_de_referencia(agora)
    grupos = agrupar_por_fato(filtrar_semana(registros, agora=agora))
    return [
        {
            'fato': fato,
            'titulo': titulo_fato(fato, len(do_fato)),
            'linhas': [_linha_resumo(r, hoje) for r in do_fato],
        }
        for fato, do_fato in grupos.items()
    ]


def gerar_texto_resumo_semanal(registros, agora=None):
    blocos = []
    for secao in gerar_resumo_semanal(registros, agora=agora):
        linhas = [secao['titulo']]
        for linha in secao['linhas']:
            linhas.append(
                f"{linha['hora']} | {linha['turno']} | {linha['data']} | "
                f"{linha['endereco']} | {linha['bairro_cidade']}"
            )
            linhas.append(linha['historico'])
            for envolvido in linha['envolvidos']:
                linhas.append(
                    f"{envolvido['qualificacao']}: {envolvido['nome']}, "
                    f"{envolvido['documento_tipo']}: {envolvido['documento_numero']}, "
                    f"{envolvido['idade']} anos"
                )
                linhas.append(f"Antecedentes: {envolvido['antecedentes']}")
            linhas.append("")
        blocos.append("\n".join(linhas).strip())
    return "\n\n".join(blocos)


# --- Documento (Word) ---

def _celula_texto(texto, largura, negrito=False, tamanho=9, sombreamento=None):
    return Celula(
        paragrafos=[Paragrafo(trechos=[Trecho(texto=texto, negrito=negrito, tamanho=tamanho)])],
        largura=largura,
        sombreamento=sombreamento,
    )


def _paragrafo_envolvido(envolvido):
    return Paragrafo(
        trechos=[
            Trecho(texto=f"{envolvido['qualificacao']}: ", negrito=True, tamanho=9),
            Trecho(texto=f"{envolvido['nome']}, ", tamanho=9),
            Trecho(texto=f"{envolvido['documento_tipo']}: ", negrito=True, tamanho=9),
            Trecho(texto=f"{envolvido['documento_numero']}, ", tamanho=9),
            Trecho(texto=f"{envolvido['idade']} anos", tamanho=9),
            Trecho(texto="\n", tamanho=9),
            Trecho(texto="Antecedentes: ", negrito=True, tamanho=9),
            Trecho(texto=envolvido['antecedentes'], tamanho=9),
        ],
        espaco_depois=6,
    )


def _tabela_secao(secao):
    larguras = [largura for _, largura in COLUNAS_RESUMO_SEMANAL]
    cabecalho = LinhaTabela(celulas=[
        _celula_texto(titulo, largura, negrito=True, tamanho=10, sombreamento=SOMBREAMENTO_CABECALHO)
        for titulo, largura in COLUNAS_RESUMO_SEMANAL
    ])

    linhas = [cabecalho]
    for linha in secao['linhas']:
        valores = [linha['hora'], linha['turno'], linha['data'], linha['endereco'], linha['bairro_cidade']]
        celulas = [_celula_texto(valor, largura) for valor, largura in zip(valores, larguras)]

        historico = Paragrafo(trechos=[Trecho(texto=linha['historico'], tamanho=9)], espaco_depois=12)
        celulas.append(Celula(
            paragrafos=[historico] + [_paragrafo_envolvido(e) for e in linha['envolvidos']],
            largura=larguras[-1],
        ))
        linhas.append(LinhaTabela(celulas=celulas))

    return Tabela(linhas=linhas, colunas=len(COLUNAS_RESUMO_SEMANAL))


def gerar_documento_resumo_semanal(registros, agora=None):
    blocos = []
    for secao in gerar_resumo_semanal(registros, agora=agora):
        blocos.append(Paragrafo(
            trechos=[Trecho(texto=secao['titulo'], negrito=True, tamanho=12)],
            espaco_antes=12,
            espaco_depois=6,
        ))
        blocos.append(_tabela_secao(secao))
    return Documento(blocos=blocos, paisagem=True)
