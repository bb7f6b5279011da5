from django.contrib import admin
from .models import Ocorrencia


@admin.register(Ocorrencia)
class OcorrenciaAdmin(admin.ModelAdmin):

    # Configuração da exibição de ocorrências no painel de admin.
    list_display = ('fato', 'fato_complementar', 'cidade', 'unidade', 'data_hora', 'oficial', 'resumo_curto', 'criado_em')
    search_fields = ('fato', 'cidade', 'local_rua', 'local_bairro', 'oficial', 'resumo')
    list_filter = ('unidade', 'cidade', 'fato', 'data_hora')
    ordering = ('-data_hora',)
    readonly_fields = ('criado_em',)

    def resumo_curto(self, obj):
        """
        Mostra apenas os primeiros 75 caracteres do resumo na lista.
        """
        if len(obj.resumo) > 75:
            return obj.resumo[:75] + '...'
        return obj.resumo
    resumo_curto.short_description = 'Resumo'
