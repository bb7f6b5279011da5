# SistemaOcorrencias/Ocorrencias/documentos.py

import re

from django.http import HttpResponse
from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.table import WD_ALIGN_VERTICAL
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Emu, Pt, Twips

from .constantes import FONTE_DOCUMENTOS
from .schemas import Tabela

CONTENT_TYPE_DOCX = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'

ALINHAMENTOS = {
    'esquerda': WD_ALIGN_PARAGRAPH.LEFT,
    'centro': WD_ALIGN_PARAGRAPH.CENTER,
    'direita': WD_ALIGN_PARAGRAPH.RIGHT,
    'justificado': WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def _preencher_paragrafo(p, paragrafo):
    for trecho in paragrafo.trechos:
        run = p.add_run(trecho.texto)
        run.font.name = FONTE_DOCUMENTOS
        if trecho.negrito:
            run.bold = True
        if trecho.italico:
            run.italic = True
        if trecho.tamanho:
            run.font.size = Pt(trecho.tamanho)

    if paragrafo.alinhamento:
        p.alignment = ALINHAMENTOS[paragrafo.alinhamento]

    p_format = p.paragraph_format
    if paragrafo.espaco_antes is not None:
        p_format.space_before = Pt(paragrafo.espaco_antes)
    if paragrafo.espaco_depois is not None:
        p_format.space_after = Pt(paragrafo.espaco_depois)


def _sombrear(cell, cor):
    tc_pr = cell._tc.get_or_add_tcPr()
    shd = OxmlElement('w:shd')
    shd.set(qn('w:val'), 'clear')
    shd.set(qn('w:color'), 'auto')
    shd.set(qn('w:fill'), cor)
    tc_pr.append(shd)


def posicionar_celulas(tabela):
    """
    Calcula a posição (linha, coluna) de cada célula na grade, pulando as
    posições já ocupadas por mesclagens de linhas anteriores.
    """
    ocupadas = set()
    posicoes = []
    for i, linha in enumerate(tabela.linhas):
        coluna = 0
        for celula in linha.celulas:
            while (i, coluna) in ocupadas:
                coluna += 1
            posicoes.append((i, coluna, celula))
            for di in range(celula.row_span):
                for dj in range(celula.col_span):
                    ocupadas.add((i + di, coluna + dj))
            coluna += celula.col_span
    return posicoes


def _adicionar_tabela(document, tabela, largura_util):
    table = document.add_table(rows=len(tabela.linhas), cols=tabela.colunas)
    table.style = 'Table Grid'
    table.autofit = False

    for i, j, celula in posicionar_celulas(tabela):
        cell = table.cell(i, j)
        if celula.row_span > 1 or celula.col_span > 1:
            cell = cell.merge(table.cell(i + celula.row_span - 1, j + celula.col_span - 1))

        if celula.largura:
            if celula.tipo_largura == 'pct':
                cell.width = Emu(int(largura_util * celula.largura / 100))
            else:
                cell.width = Twips(celula.largura)
        if celula.sombreamento:
            _sombrear(cell, celula.sombreamento)
        if celula.centralizar_vertical:
            cell.vertical_alignment = WD_ALIGN_VERTICAL.CENTER

        for indice, paragrafo in enumerate(celula.paragrafos):
            p = cell.paragraphs[0] if indice == 0 else cell.add_paragraph()
            _preencher_paragrafo(p, paragrafo)

    return table


def criar_documento(conteudo):
    """Monta o .docx a partir dos blocos (parágrafos e tabelas) do conteúdo."""
    document = Document()

    style = document.styles['Normal']
    font = style.font
    font.name = FONTE_DOCUMENTOS
    font.size = Pt(conteudo.tamanho_fonte)

    section = document.sections[0]
    if conteudo.paisagem:
        section.orientation = WD_ORIENT.LANDSCAPE
        section.page_width, section.page_height = section.page_height, section.page_width
    largura_util = section.page_width - section.left_margin - section.right_margin

    for bloco in conteudo.blocos:
        if isinstance(bloco, Tabela):
            _adicionar_tabela(document, bloco, largura_util)
        else:
            _preencher_paragrafo(document.add_paragraph(), bloco)

    return document


def nome_arquivo_seguro(nome):
    return re.sub(r'[\\/"\r\n]+', ' ', nome).strip()


def resposta_docx(conteudo, nome_arquivo):
    document = criar_documento(conteudo)
    response = HttpResponse(content_type=CONTENT_TYPE_DOCX)
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo_seguro(nome_arquivo)}"'
    document.save(response)
    return response
