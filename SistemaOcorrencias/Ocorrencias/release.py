"""
Formatação do release da ocorrência (mensagem para WhatsApp).

O texto é montado a partir de dados possivelmente incompletos (o formulário
ainda sendo preenchido), então cada campo ausente vira um marcador entre
colchetes em vez de gerar erro.
"""
from .constantes import CRPM, NADA_CONSTA, NAO_DISPONIVEL, SEM_MATERIAL
from .utils import (
    calcular_idade,
    capitalizar_frase,
    codificar_data_militar,
    formatar_qualificacao,
    obter_campo,
)


def _texto(valor):
    return str(valor).strip() if valor is not None else ""


def _ou_marcador(valor, marcador):
    texto = _texto(valor)
    return texto if texto else marcador


def formatar_local(registro):
    rua = _texto(obter_campo(registro, 'local_rua'))
    numero = _texto(obter_campo(registro, 'local_numero'))
    bairro = _texto(obter_campo(registro, 'local_bairro'))
    if not (rua or numero or bairro):
        return "[LOCAL]"
    rua = rua.lower() or "[RUA]"
    numero = numero.lower() or "[NÚMERO]"
    bairro = bairro.lower() or "[BAIRRO]"
    return f"{rua}, nº {numero}, bairro {bairro}"


def formatar_envolvido(envolvido, hoje=None):
    """Bloco de linhas de um envolvido, cada campo com o seu próprio padrão."""
    role = _texto(obter_campo(envolvido, 'role'))
    qualificacao = formatar_qualificacao(role) if role else "Envolvido"
    nome = _ou_marcador(obter_campo(envolvido, 'nome'), "[NOME]").upper()
    documento_tipo = _ou_marcador(obter_campo(envolvido, 'documento_tipo'), "DOCUMENTO").upper()
    documento_numero = _ou_marcador(obter_campo(envolvido, 'documento_numero'), "[DOCUMENTO]")

    idade = calcular_idade(obter_campo(envolvido, 'data_nascimento'), hoje=hoje)
    idade = idade if idade == NAO_DISPONIVEL else f"{idade} anos"

    antecedentes = capitalizar_frase(_texto(obter_campo(envolvido, 'antecedentes')) or NADA_CONSTA)
    orcrim = capitalizar_frase(_texto(obter_campo(envolvido, 'orcrim')) or NADA_CONSTA)

    return "\n".join([
        f"*{qualificacao}:* {nome}",
        f"*{documento_tipo}:* {documento_numero}",
        f"*Idade:* {idade}",
        f"*Antecedentes:* {antecedentes}",
        f"*Orcrim:* {orcrim}",
    ])


def formatar_material(material):
    if material is None:
        return "[MATERIAL]"
    itens = [_texto(item) for item in material if _texto(item)]
    if not itens:
        return SEM_MATERIAL
    return "\n".join(f"- {item}" for item in itens)


def formatar_release(registro, preliminar=False, hoje=None):
    """
    Monta o release da ocorrência na ordem fixa de seções.

    `registro` pode ser um Ocorrencia ou um dicionário com as mesmas chaves
    (rascunho do formulário); `preliminar` adiciona as faixas de abertura e
    de fechamento de ocorrência em andamento.
    """
    fato = _ou_marcador(obter_campo(registro, 'fato'), "[FATO]").upper()
    fato_complementar = _texto(obter_campo(registro, 'fato_complementar')).upper()
    cidade = _ou_marcador(obter_campo(registro, 'cidade'), "[CIDADE]")
    unidade = _ou_marcador(obter_campo(registro, 'unidade'), "[UNIDADE]")
    data_hora = codificar_data_militar(obter_campo(registro, 'data_hora')) or "[DATA/HORA]"
    motivacao = _ou_marcador(obter_campo(registro, 'motivacao'), "[MOTIVAÇÃO]")
    oficial = _ou_marcador(obter_campo(registro, 'oficial'), "[OFICIAL]")
    resumo = capitalizar_frase(_texto(obter_campo(registro, 'resumo'))) or "[RESUMO]"

    envolvidos = obter_campo(registro, 'envolvidos', [])
    if envolvidos:
        envolvidos_texto = "\n\n".join(formatar_envolvido(e, hoje=hoje) for e in envolvidos)
    else:
        envolvidos_texto = "[ENVOLVIDOS]"

    secoes = []
    if preliminar:
        secoes.append("*PRELIMINAR*")

    titulo = f"*FATO*\n{fato}"
    if fato_complementar:
        titulo += f"\n{fato_complementar}"
    secoes.append(titulo)

    secoes.append(f"*CIDADE - {CRPM} / UNIDADE*\n{cidade} - {CRPM} / {unidade}")
    secoes.append(f"*DATA/HORA:*\n{data_hora}")
    secoes.append(f"*LOCAL:*\n{formatar_local(registro)}")
    secoes.append(f"*ENVOLVIDOS:*\n{envolvidos_texto}")
    secoes.append(f"*MOTIVAÇÃO:*\n{motivacao}")
    secoes.append(f"*MATERIAL APREENDIDO:*\n{formatar_material(obter_campo(registro, 'material'))}")
    secoes.append(f"*OFICIAL:*\n{oficial}")
    secoes.append(f"*RESUMO DO FATO:*\n{resumo}")

    if preliminar:
        secoes.append("*OCORRÊNCIA EM ANDAMENTO*")

    return "\n\n".join(secoes)
