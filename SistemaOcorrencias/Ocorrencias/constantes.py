# SistemaOcorrencias/Ocorrencias/constantes.py

# Unidades policiais e as cidades que cada uma atende
UNIDADES = ["41º BPM", "2ª Cia Ind"]

CIDADES_POR_UNIDADE = {
    "41º BPM": [
        "Gramado",
        "Canela",
        "São Francisco de Paula",
        "Nova Petrópolis",
        "Picada Café",
        "Cambará do Sul",
    ],
    "2ª Cia Ind": [
        "Taquara",
        "Rolante",
        "Riozinho",
        "Igrejinha",
        "Três Coroas",
    ],
}

CRPM = "CRPM HORTÊNSIAS"

# Ordem fixa das seções do relatório RPI
ORDEM_UNIDADES_RPI = [
    "1ª CIA - GRAMADO",
    "3º PEL - NOVA PETRÓPOLIS",
    "4º GPM - PICADA CAFÉ",
    "2ª CIA – CANELA",
    "3º PEL - SÃO FRANCISCO DE PAULA",
    "4º GPM - CAMBARÁ DO SUL",
    "2ª CIA IND PM TAQUARA",
    "3º PEL – ROLANTE",
    "4º GPM - RIOZINHO",
    "4º PEL – IGREJINHA",
    "5º PEL - TRÊS COROAS",
]

UNIDADE_RPI_POR_CIDADE = {
    "Gramado": "1ª CIA - GRAMADO",
    "Nova Petrópolis": "3º PEL - NOVA PETRÓPOLIS",
    "Picada Café": "4º GPM - PICADA CAFÉ",
    "Canela": "2ª CIA – CANELA",
    "São Francisco de Paula": "3º PEL - SÃO FRANCISCO DE PAULA",
    "Cambará do Sul": "4º GPM - CAMBARÁ DO SUL",
    "Taquara": "2ª CIA IND PM TAQUARA",
    "Rolante": "3º PEL – ROLANTE",
    "Riozinho": "4º GPM - RIOZINHO",
    "Igrejinha": "4º PEL – IGREJINHA",
    "Três Coroas": "5º PEL - TRÊS COROAS",
}

# Fatos do resumo semanal. Também são as opções rápidas do formulário
# e os fatos que escapam da exclusão automática de 24h.
FATOS_SEMANAIS = [
    "HOMICÍDIO DOLOSO",
    "ROUBO A PEDESTRE",
    "ROUBO DE VEÍCULO",
    "ROUBO A ESTABELECIMENTO COMERCIAL E DE ENSINO",
    "ROUBO A RESIDÊNCIA",
    "FURTO DE VEÍCULO",
    "FURTO EM VEÍCULO",
    "HOMICÍDIO CULPOSO EM DIREÇÃO DE VEÍCULO AUTOMOTOR",
]

QUALIFICACOES = [
    "VÍTIMA",
    "AUTOR",
    "TESTEMUNHA",
    "PRESO",
    "MENOR APREENDIDO",
    "CONDUTOR",
    "ATENDIDO",
    "SUSPEITO",
]

TIPOS_DOCUMENTO = ["RG", "CPF"]

# Abreviações dos meses usadas no grupo data-hora (DDHHMMMMMYY)
MESES_ABREVIADOS = {
    1: "JAN",
    2: "FEV",
    3: "MAR",
    4: "ABR",
    5: "MAI",
    6: "JUN",
    7: "JUL",
    8: "AGO",
    9: "SET",
    10: "OUT",
    11: "NOV",
    12: "DEZ",
}
MESES_POR_ABREVIACAO = {abrev: f"{mes:02d}" for mes, abrev in MESES_ABREVIADOS.items()}

# Janelas de tempo
JANELA_RPI_HORAS = 24
JANELA_SEMANAL_DIAS = 7

# Valores padrão
NAO_DISPONIVEL = "N/A"
NADA_CONSTA = "Nada consta"
MOTIVACAO_PADRAO = "Desconhecida"
SEM_REGISTRO_RPI = "SN."
SEM_MATERIAL = "Nenhum"

# Larguras das colunas do resumo semanal, em twips
COLUNAS_RESUMO_SEMANAL = [
    ("HORA", 800),
    ("TURNO", 1000),
    ("DATA", 1200),
    ("ENDEREÇO", 2500),
    ("BAIRRO / CIDADE", 2500),
    ("HISTÓRICO", 4500),
]

FONTE_DOCUMENTOS = "Times New Roman"
