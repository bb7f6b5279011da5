from django.urls import path
from . import api, views

app_name = 'Ocorrencias'

urlpatterns = [
    # Menu e editor do release
    path('', views.index, name='index'),
    path('ocorrencia/nova/', views.editor, name='nova'),
    path('ocorrencia/<int:pk>/editar/', views.editor, name='editar'),
    path('ocorrencia/<int:pk>/excluir/', views.OcorrenciaDeleteView.as_view(), name='excluir'),

    # Relatórios
    path('rpi/', views.relatorio_rpi, name='relatorio_rpi'),
    path('rpi/docx/', views.exportar_rpi_docx, name='exportar_rpi_docx'),
    path('semanal/', views.resumo_semanal, name='resumo_semanal'),
    path('semanal/docx/', views.exportar_resumo_semanal_docx, name='exportar_resumo_semanal_docx'),
    path('cartoriais/', views.cartoriais, name='cartoriais'),
    path('cartoriais/<int:pk>/docx/', views.exportar_cartoriais_docx, name='exportar_cartoriais_docx'),

    # API JSON
    path('api/ocorrencias/', api.ocorrencias_api, name='api_ocorrencias'),
    path('api/ocorrencias/preview/', api.preview_api, name='api_preview'),
    path('api/ocorrencias/<int:pk>/', api.ocorrencia_api, name='api_ocorrencia'),
]
