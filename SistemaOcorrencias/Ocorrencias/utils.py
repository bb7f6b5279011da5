import re
from datetime import date, datetime

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .constantes import MESES_ABREVIADOS, MESES_POR_ABREVIACAO, NAO_DISPONIVEL

GRUPO_DATA_HORA_REGEX = re.compile(r'^(\d{2})(\d{2})(\d{2})([A-Z]{3})(\d{2})$')


def como_datetime(valor):
    """
    Converte o valor recebido (datetime ou texto ISO/datetime-local) para um
    datetime no fuso configurado. Retorna None se não for possível.
    """
    if not valor:
        return None
    if isinstance(valor, datetime):
        dt = valor
    elif isinstance(valor, date):
        dt = datetime(valor.year, valor.month, valor.day)
    else:
        try:
            dt = parse_datetime(str(valor).strip())
        except ValueError:
            return None
        if dt is None:
            return None
    if timezone.is_aware(dt):
        return timezone.localtime(dt)
    return dt


def codificar_data_militar(valor):
    """Formata a data no grupo data-hora DDHHMMMMMYY (ex: 151630JAN25)."""
    dt = como_datetime(valor)
    if dt is None:
        return None
    return f"{dt:%d%H%M}{MESES_ABREVIADOS[dt.month]}{dt:%y}"


def decodificar_data_militar(token):
    """
    Converte um grupo data-hora (DDHHMMMMMYY) de volta para um timestamp
    ISO-8601 com segundos zerados. O grupo é escrito no horário local, então
    o resultado leva o deslocamento do fuso configurado (ex: -03:00).
    Levanta ValueError se o texto não estiver no formato.
    """
    texto = (token or '').strip().upper()
    match = GRUPO_DATA_HORA_REGEX.match(texto)
    if not match:
        raise ValueError(f"Grupo data-hora inválido: '{token}'")

    dia, hora, minuto, mes_abrev, ano = match.groups()
    mes = MESES_POR_ABREVIACAO.get(mes_abrev)
    if mes is None:
        raise ValueError(f"Mês desconhecido no grupo data-hora: '{mes_abrev}'")

    # datetime() valida a data (ex: 310230FEV25 não existe)
    dt = datetime(2000 + int(ano), int(mes), int(dia), int(hora), int(minuto))
    return timezone.make_aware(dt).isoformat()


def calcular_idade(data_nascimento, hoje=None):
    """Anos completos desde a data de nascimento, ou 'N/A' se a data for inválida."""
    if not data_nascimento:
        return NAO_DISPONIVEL

    if isinstance(data_nascimento, datetime):
        nascimento = data_nascimento.date()
    elif isinstance(data_nascimento, date):
        nascimento = data_nascimento
    else:
        texto = str(data_nascimento).strip()
        try:
            nascimento = parse_date(texto[:10])
        except ValueError:
            nascimento = None
        if nascimento is None:
            return NAO_DISPONIVEL

    hoje = hoje or timezone.localdate()
    idade = hoje.year - nascimento.year - ((hoje.month, hoje.day) < (nascimento.month, nascimento.day))
    return str(idade)


def capitalizar_frase(texto):
    """Coloca em maiúscula a primeira letra do texto e de cada frase."""
    if not texto:
        return ""
    return re.sub(r'(^\s*\w|[.!?]\s+\w)', lambda m: m.group(0).upper(), texto)


def classificar_turno(valor):
    """
    Turno da ocorrência pelo minuto do dia:
    00:01-06:00 1º, 06:01-12:00 2º, 12:01-18:00 3º, 18:01-00:00 4º.
    """
    dt = como_datetime(valor)
    if dt is None:
        return NAO_DISPONIVEL

    minutos = dt.hour * 60 + dt.minute
    if 1 <= minutos <= 360:
        return "1º TURNO"
    if 360 < minutos <= 720:
        return "2º TURNO"
    if 720 < minutos <= 1080:
        return "3º TURNO"
    return "4º TURNO"


def aplicar_mascara_cpf(valor):
    """Remove o que não for dígito e aplica progressivamente a máscara 000.000.000-00."""
    digitos = re.sub(r'\D', '', valor or '')
    digitos = re.sub(r'(\d{3})(\d)', r'\1.\2', digitos, count=1)
    digitos = re.sub(r'(\d{3})(\d)', r'\1.\2', digitos, count=1)
    digitos = re.sub(r'(\d{3})(\d{1,2})', r'\1-\2', digitos, count=1)
    return re.sub(r'(-\d{2})\d+?$', r'\1', digitos, count=1)


def formatar_nome_proprio(nome):
    """'JOÃO DA SILVA' -> 'João Da Silva'"""
    return re.sub(r'(^\w|\s\w)', lambda m: m.group(0).upper(), (nome or '').lower())


def formatar_qualificacao(qualificacao):
    """'MENOR APREENDIDO' -> 'Menor apreendido'"""
    if not qualificacao:
        return ""
    return qualificacao[:1].upper() + qualificacao[1:].lower()


def obter_campo(registro, campo, padrao=None):
    """Lê um campo tanto de um dicionário (rascunho do formulário) quanto de um modelo."""
    if registro is None:
        return padrao
    if isinstance(registro, dict):
        valor = registro.get(campo, padrao)
    else:
        valor = getattr(registro, campo, padrao)
    return padrao if valor is None else valor


def dentro_da_janela(valor, inicio, fim):
    """Verifica se a data do registro está no intervalo fechado [inicio, fim]."""
    dt = como_datetime(valor)
    if dt is None:
        return False
    if timezone.is_aware(inicio) and timezone.is_naive(dt):
        dt = timezone.make_aware(dt)
    elif timezone.is_naive(inicio) and timezone.is_aware(dt):
        dt = timezone.make_naive(dt)
    return inicio <= dt <= fim


def data_de_referencia(agora):
    """Data local correspondente ao instante `agora` (usada no cálculo de idade)."""
    if agora is None:
        return timezone.localdate()
    if timezone.is_aware(agora):
        return timezone.localtime(agora).date()
    return agora.date()
