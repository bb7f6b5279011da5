import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required, user_passes_test
from django.db import transaction
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse, reverse_lazy
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views.generic import DeleteView

from .api import rascunho_do_formulario
from .cartoriais import gerar_documento_cartoriais, gerar_tabelas_cartoriais, nome_arquivo_cartoriais, rotulo_selecao
from .constantes import FATOS_SEMANAIS
from .documentos import resposta_docx
from .forms import EnvolvidoFormSet, OcorrenciaForm, envolvidos_do_formset
from .models import Ocorrencia
from .permissions import has_exclusao_access, has_relatorios_access
from .relatorio_rpi import gerar_documento_rpi, gerar_paragrafos_rpi, gerar_texto_rpi
from .release import formatar_release
from .resumo_semanal import gerar_documento_resumo_semanal, gerar_resumo_semanal, gerar_texto_resumo_semanal

logger = logging.getLogger(__name__)

relatorios_required = user_passes_test(has_relatorios_access)
exclusao_required = user_passes_test(has_exclusao_access)


@login_required
def index(request):
    """Menu principal com o histórico de ocorrências."""
    context = {
        'ocorrencias': Ocorrencia.objects.listar(),
    }
    return render(request, 'Ocorrencias/index.html', context)


@login_required
def editor(request, pk=None):
    """
    Cria ou edita uma ocorrência. Ao salvar, volta para o editor mostrando
    o release pronto para copiar.
    """
    ocorrencia = get_object_or_404(Ocorrencia, pk=pk) if pk else None

    if request.method == 'POST':
        form = OcorrenciaForm(request.POST, instance=ocorrencia)
        formset = EnvolvidoFormSet(request.POST, prefix='envolvidos')

        formset_valido = formset.is_valid()
        if formset_valido:
            form.instance.envolvidos = envolvidos_do_formset(formset)

        if form.is_valid() and formset_valido:
            with transaction.atomic():
                ocorrencia = form.save()
            acao = "atualizada" if pk else "registrada"
            logger.info(f"Ocorrência {ocorrencia.pk} {acao} por '{request.user.username}'.")
            messages.success(request, f'Ocorrência "{ocorrencia.fato}" {acao} com sucesso!')

            url = reverse('Ocorrencias:editar', kwargs={'pk': ocorrencia.pk})
            if form.cleaned_data.get('preliminar'):
                url += '?preliminar=1'
            return redirect(url)

        messages.error(request, "Verifique os campos destacados.")
        release = formatar_release(
            rascunho_do_formulario(request.POST, formset),
            preliminar=bool(request.POST.get('preliminar')),
        )
    else:
        form = OcorrenciaForm(instance=ocorrencia, initial={'preliminar': bool(request.GET.get('preliminar'))})
        formset = EnvolvidoFormSet(initial=ocorrencia.envolvidos if ocorrencia else None, prefix='envolvidos')
        release = formatar_release(ocorrencia, preliminar=bool(request.GET.get('preliminar')))

    context = {
        'form': form,
        'formset': formset,
        'ocorrencia': ocorrencia,
        'release': release,
        'fatos_semanais': FATOS_SEMANAIS,
        'ocorrencias': Ocorrencia.objects.listar(),
    }
    return render(request, 'Ocorrencias/editor.html', context)


@login_required
@relatorios_required
def relatorio_rpi(request):
    ocorrencias = Ocorrencia.objects.listar()
    texto = gerar_texto_rpi(ocorrencias)
    context = {
        'texto': texto,
        'paragrafos': gerar_paragrafos_rpi(texto),
    }
    return render(request, 'Ocorrencias/relatorio_rpi.html', context)


@login_required
@relatorios_required
def exportar_rpi_docx(request):
    documento = gerar_documento_rpi(Ocorrencia.objects.listar())
    nome = f"Relatorio RPI {timezone.localdate():%d-%m-%Y}.docx"
    return resposta_docx(documento, nome)


@login_required
@relatorios_required
def resumo_semanal(request):
    ocorrencias = Ocorrencia.objects.listar()
    context = {
        'secoes': gerar_resumo_semanal(ocorrencias),
        'texto': gerar_texto_resumo_semanal(ocorrencias),
    }
    return render(request, 'Ocorrencias/resumo_semanal.html', context)


@login_required
@relatorios_required
def exportar_resumo_semanal_docx(request):
    documento = gerar_documento_resumo_semanal(Ocorrencia.objects.listar())
    nome = f"Resumo Semanal {timezone.localdate():%d-%m-%Y}.docx"
    return resposta_docx(documento, nome)


@login_required
@relatorios_required
def cartoriais(request):
    ocorrencias = Ocorrencia.objects.listar()
    selecionada = None
    selecionada_id = request.GET.get('ocorrencia')
    if selecionada_id:
        selecionada = next((o for o in ocorrencias if str(o.pk) == selecionada_id), None)
        if selecionada is None:
            messages.warning(request, "Ocorrência não encontrada.")

    context = {
        'opcoes': [(o.pk, rotulo_selecao(o)) for o in ocorrencias],
        'selecionada': selecionada,
        'tabelas': gerar_tabelas_cartoriais(selecionada) if selecionada else [],
    }
    return render(request, 'Ocorrencias/cartoriais.html', context)


@login_required
@relatorios_required
def exportar_cartoriais_docx(request, pk):
    ocorrencia = get_object_or_404(Ocorrencia, pk=pk)
    if not ocorrencia.envolvidos:
        messages.warning(request, "A ocorrência não possui envolvidos para gerar as tabelas.")
        return redirect(f"{reverse('Ocorrencias:cartoriais')}?ocorrencia={pk}")
    return resposta_docx(gerar_documento_cartoriais(ocorrencia), nome_arquivo_cartoriais(ocorrencia))


@method_decorator([login_required, exclusao_required], name='dispatch')
class OcorrenciaDeleteView(DeleteView):
    model = Ocorrencia
    template_name = 'Ocorrencias/ocorrencia_confirm_delete.html'
    success_url = reverse_lazy('Ocorrencias:index')

    def form_valid(self, form):
        logger.info(f"Ocorrência {self.object.pk} apagada por '{self.request.user.username}'.")
        messages.success(self.request, "Ocorrência apagada com sucesso.")
        return super().form_valid(form)
