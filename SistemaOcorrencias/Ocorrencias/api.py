"""
API JSON das ocorrências.

Os campos seguem os nomes usados pelo front-end (camelCase); a validação é
a mesma do formulário do editor.
"""
import json
import logging
from functools import wraps

from django import forms
from django.db import transaction
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from .forms import OcorrenciaForm, interpretar_data_hora
from .models import Ocorrencia
from .permissions import has_exclusao_access
from .release import formatar_release
from .schemas import Envolvido
from .utils import aplicar_mascara_cpf

logger = logging.getLogger(__name__)

NAO_ENCONTRADA = "Ocorrência não encontrada"

# campo da API -> campo do formulário/modelo
CAMPOS_API = {
    'fato': 'fato',
    'fatoComplementar': 'fato_complementar',
    'unidade': 'unidade',
    'cidade': 'cidade',
    'dataHora': 'data_hora',
    'localRua': 'local_rua',
    'localNumero': 'local_numero',
    'localBairro': 'local_bairro',
    'oficial': 'oficial',
    'resumo': 'resumo',
    'motivacao': 'motivacao',
}
CAMPOS_FORMULARIO = {campo: campo_api for campo_api, campo in CAMPOS_API.items()}
CAMPOS_FORMULARIO['material_texto'] = 'material'

CAMPOS_ENVOLVIDO = {
    'role': 'role',
    'nome': 'nome',
    'documentoTipo': 'documento_tipo',
    'documentoNumero': 'documento_numero',
    'dataNascimento': 'data_nascimento',
    'antecedentes': 'antecedentes',
    'orcrim': 'orcrim',
}


class ErroPayload(Exception):
    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


def api_login_required(view_func):
    """Como login_required, mas responde 401 em JSON em vez de redirecionar."""
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({'message': "Autenticação necessária"}, status=401)
        return view_func(request, *args, **kwargs)
    return _wrapped_view


def _erro(message, field=None, status=400):
    return JsonResponse({'message': message, 'field': field}, status=status)


def _ler_json(request):
    try:
        dados = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ErroPayload("JSON inválido")
    if not isinstance(dados, dict):
        raise ErroPayload("O corpo da requisição deve ser um objeto JSON")
    return dados


def _envolvidos_do_payload(dados):
    envolvidos = dados.get('envolvidos') or []
    if not isinstance(envolvidos, list):
        raise ErroPayload("Envolvidos deve ser uma lista", 'envolvidos')
    try:
        return [Envolvido.model_validate(e).para_banco() for e in envolvidos]
    except ValueError as e:
        raise ErroPayload(f"Envolvido inválido: {e}", 'envolvidos')


def _material_do_payload(dados):
    material = dados.get('material') or []
    if not isinstance(material, list) or not all(isinstance(item, str) for item in material):
        raise ErroPayload("Material deve ser uma lista de textos", 'material')
    return "\n".join(material)


def _salvar(dados, instance=None):
    """Valida o payload com o OcorrenciaForm e grava de forma atômica."""
    form_data = {campo: dados.get(campo_api) or '' for campo_api, campo in CAMPOS_API.items()}
    form_data['material_texto'] = _material_do_payload(dados)

    form = OcorrenciaForm(data=form_data, instance=instance)
    form.instance.envolvidos = _envolvidos_do_payload(dados)

    if not form.is_valid():
        campo, erros = next(iter(form.errors.items()))
        field = None if campo == '__all__' else CAMPOS_FORMULARIO.get(campo, campo)
        raise ErroPayload(erros[0], field)

    with transaction.atomic():
        return form.save()


@api_login_required
@require_http_methods(["GET", "POST"])
def ocorrencias_api(request):
    if request.method == 'GET':
        return JsonResponse([o.to_dict() for o in Ocorrencia.objects.listar()], safe=False)

    try:
        ocorrencia = _salvar(_ler_json(request))
    except ErroPayload as e:
        return _erro(e.message, e.field)
    logger.info(f"Ocorrência {ocorrencia.pk} criada via API por '{request.user.username}'.")
    return JsonResponse(ocorrencia.to_dict(), status=201)


@api_login_required
@require_http_methods(["GET", "PUT", "DELETE"])
def ocorrencia_api(request, pk):
    if request.method == 'DELETE':
        if not has_exclusao_access(request.user):
            return JsonResponse({'message': "Sem permissão para apagar ocorrências"}, status=403)
        apagadas, _ = Ocorrencia.objects.filter(pk=pk).delete()
        if apagadas:
            logger.info(f"Ocorrência {pk} apagada via API por '{request.user.username}'.")
        return HttpResponse(status=204)

    ocorrencia = Ocorrencia.objects.filter(pk=pk).first()
    if ocorrencia is None:
        return JsonResponse({'message': NAO_ENCONTRADA}, status=404)

    if request.method == 'GET':
        return JsonResponse(ocorrencia.to_dict())

    try:
        ocorrencia = _salvar(_ler_json(request), instance=ocorrencia)
    except ErroPayload as e:
        return _erro(e.message, e.field)
    logger.info(f"Ocorrência {ocorrencia.pk} atualizada via API por '{request.user.username}'.")
    return JsonResponse(ocorrencia.to_dict())


def _envolvido_rascunho(envolvido):
    rascunho = {campo: envolvido.get(campo_api) for campo_api, campo in CAMPOS_ENVOLVIDO.items()}
    if str(rascunho['documento_tipo'] or '').upper() == 'CPF' and rascunho['documento_numero']:
        rascunho['documento_numero'] = aplicar_mascara_cpf(str(rascunho['documento_numero']))
    return rascunho


def _rascunho(dados):
    """Converte o payload (possivelmente incompleto) nas chaves usadas pelos formatadores."""
    rascunho = {campo: dados.get(campo_api) for campo_api, campo in CAMPOS_API.items()}
    try:
        rascunho['data_hora'] = interpretar_data_hora(dados.get('dataHora'))
    except forms.ValidationError:
        rascunho['data_hora'] = None

    material = dados.get('material')
    rascunho['material'] = material if isinstance(material, list) else None

    envolvidos = dados.get('envolvidos')
    rascunho['envolvidos'] = [
        _envolvido_rascunho(e)
        for e in (envolvidos if isinstance(envolvidos, list) else [])
        if isinstance(e, dict)
    ]
    return rascunho


def rascunho_do_formulario(post, formset):
    """Rascunho a partir do POST do editor (formulário + formset de envolvidos)."""
    dados = {campo_api: post.get(campo) for campo_api, campo in CAMPOS_API.items()}
    dados['material'] = [linha.strip() for linha in post.get('material_texto', '').splitlines() if linha.strip()]
    dados['envolvidos'] = [
        {campo_api: post.get(f'{formset.prefix}-{i}-{campo}') for campo_api, campo in CAMPOS_ENVOLVIDO.items()}
        for i in range(formset.total_form_count())
        if not post.get(f'{formset.prefix}-{i}-DELETE')
    ]
    return _rascunho(dados)


@api_login_required
@require_POST
def preview_api(request):
    """Renderiza o release para os dados que estiverem preenchidos no formulário."""
    try:
        dados = _ler_json(request)
    except ErroPayload as e:
        return _erro(e.message, e.field)
    texto = formatar_release(_rascunho(dados), preliminar=bool(dados.get('preliminar')))
    return JsonResponse({'texto': texto})
