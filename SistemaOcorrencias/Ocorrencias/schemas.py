from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constantes import NADA_CONSTA, QUALIFICACOES, TIPOS_DOCUMENTO
from .utils import aplicar_mascara_cpf


# --- Envolvidos ---

class Envolvido(BaseModel):
    """
    Pessoa envolvida numa ocorrência. É guardada dentro do próprio registro
    (JSON) e não tem ciclo de vida independente.
    Aceita tanto as chaves do banco (snake_case) quanto as da API (camelCase).
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    role: str = Field(description="Qualificação do envolvido (VÍTIMA, AUTOR, TESTEMUNHA...).")
    nome: str = Field(min_length=1, description="Nome completo do envolvido.")
    documento_tipo: str = Field(default="RG", alias="documentoTipo", description="Tipo do documento: RG ou CPF.")
    documento_numero: str = Field(default="", alias="documentoNumero", description="Número do documento.")
    data_nascimento: Optional[str] = Field(default=None, alias="dataNascimento", description="Data de nascimento no formato AAAA-MM-DD.")
    antecedentes: str = Field(default=NADA_CONSTA, description="Antecedentes criminais.")
    orcrim: str = Field(default=NADA_CONSTA, description="Vínculo com organização criminosa.")

    @field_validator('role')
    @classmethod
    def validar_role(cls, valor):
        valor = valor.upper()
        if valor not in QUALIFICACOES:
            raise ValueError(f"Qualificação inválida: '{valor}'")
        return valor

    @field_validator('documento_tipo')
    @classmethod
    def validar_documento_tipo(cls, valor):
        valor = (valor or "RG").upper()
        if valor not in TIPOS_DOCUMENTO:
            raise ValueError(f"Tipo de documento inválido: '{valor}'")
        return valor

    @field_validator('data_nascimento', mode='before')
    @classmethod
    def normalizar_data_nascimento(cls, valor):
        if not valor:
            return None
        # date/datetime vindos do formulário
        if hasattr(valor, 'isoformat'):
            return valor.isoformat()[:10]
        return str(valor)

    @field_validator('antecedentes', 'orcrim', mode='before')
    @classmethod
    def padrao_nada_consta(cls, valor):
        return valor or NADA_CONSTA

    @model_validator(mode='after')
    def mascarar_cpf(self):
        if self.documento_tipo == "CPF" and self.documento_numero:
            self.documento_numero = aplicar_mascara_cpf(self.documento_numero)
        return self

    def para_banco(self):
        return self.model_dump()

    def para_api(self):
        return self.model_dump(by_alias=True)


# --- Conteúdo de documentos (parágrafos e tabelas) ---

class Trecho(BaseModel):
    texto: str
    negrito: bool = False
    italico: bool = False
    tamanho: Optional[float] = Field(default=None, description="Tamanho da fonte em pontos.")


class Paragrafo(BaseModel):
    tipo: Literal['paragrafo'] = 'paragrafo'
    trechos: List[Trecho] = Field(default_factory=list)
    alinhamento: Optional[Literal['esquerda', 'centro', 'direita', 'justificado']] = None
    espaco_antes: Optional[float] = Field(default=None, description="Espaçamento antes, em pontos.")
    espaco_depois: Optional[float] = Field(default=None, description="Espaçamento depois, em pontos.")

    @property
    def texto(self):
        return "".join(trecho.texto for trecho in self.trechos)


class Celula(BaseModel):
    paragrafos: List[Paragrafo] = Field(default_factory=list)
    col_span: int = Field(default=1, ge=1)
    row_span: int = Field(default=1, ge=1)
    largura: Optional[int] = Field(default=None, description="Largura em twips (dxa) ou em porcentagem (pct).")
    tipo_largura: Literal['dxa', 'pct'] = 'dxa'
    sombreamento: Optional[str] = Field(default=None, description="Cor de fundo em hexadecimal, ex: F2F2F2.")
    centralizar_vertical: bool = False

    @property
    def texto(self):
        return "\n".join(paragrafo.texto for paragrafo in self.paragrafos)


class LinhaTabela(BaseModel):
    celulas: List[Celula] = Field(default_factory=list)


class Tabela(BaseModel):
    tipo: Literal['tabela'] = 'tabela'
    linhas: List[LinhaTabela] = Field(default_factory=list)
    colunas: int = Field(ge=1, description="Número de colunas da grade.")


Bloco = Union[Paragrafo, Tabela]


class Documento(BaseModel):
    blocos: List[Bloco] = Field(default_factory=list)
    paisagem: bool = False
    tamanho_fonte: float = 12
