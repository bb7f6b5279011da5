from django import forms
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .constantes import CIDADES_POR_UNIDADE, QUALIFICACOES, TIPOS_DOCUMENTO
from .models import Ocorrencia
from .schemas import Envolvido
from .utils import GRUPO_DATA_HORA_REGEX, decodificar_data_militar


def interpretar_data_hora(valor):
    """
    Converte o texto digitado no campo de data/hora (datetime-local, ISO ou
    grupo data-hora como 151630JAN25) num datetime com fuso.
    O grupo data-hora é lido no horário local.
    """
    texto = str(valor).strip() if valor is not None else ''
    if not texto:
        raise forms.ValidationError("Informe a data e hora da ocorrência.")

    if GRUPO_DATA_HORA_REGEX.match(texto.upper()):
        try:
            return parse_datetime(decodificar_data_militar(texto))
        except ValueError as e:
            raise forms.ValidationError(str(e))

    try:
        dt = parse_datetime(texto)
    except ValueError:
        dt = None
    if dt is None:
        raise forms.ValidationError("Data/hora inválida. Use AAAA-MM-DDTHH:MM ou o grupo data-hora (ex: 151630JAN25).")
    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt)
    return dt


class EnvolvidoForm(forms.Form):
    role = forms.ChoiceField(choices=[(q, q) for q in QUALIFICACOES], label="Qualificação")
    nome = forms.CharField(max_length=255, label="Nome Completo")
    documento_tipo = forms.ChoiceField(choices=[(t, t) for t in TIPOS_DOCUMENTO], initial="RG", label="Documento")
    documento_numero = forms.CharField(max_length=50, required=False, label="Número do Documento")
    data_nascimento = forms.DateField(
        required=False,
        label="Data de Nascimento",
        widget=forms.DateInput(format='%Y-%m-%d', attrs={'type': 'date'}),
    )
    antecedentes = forms.CharField(required=False, label="Antecedentes Criminais", widget=forms.Textarea(attrs={'rows': 2}))
    orcrim = forms.CharField(required=False, label="Orcrim")

    def clean(self):
        cleaned_data = super().clean()
        if self.errors:
            return cleaned_data
        try:
            envolvido = Envolvido.model_validate(cleaned_data)
        except ValueError as e:
            raise forms.ValidationError(str(e))
        # Devolve o número já com a máscara de CPF aplicada
        cleaned_data['documento_numero'] = envolvido.documento_numero
        self.envolvido = envolvido
        return cleaned_data


EnvolvidoFormSet = forms.formset_factory(EnvolvidoForm, extra=0, can_delete=True)


def envolvidos_do_formset(formset):
    """Lista de envolvidos (para o JSON do modelo) na ordem em que foram preenchidos."""
    excluidos = formset.deleted_forms if formset.can_delete else []
    return [
        form.envolvido.para_banco()
        for form in formset.forms
        if form not in excluidos and hasattr(form, 'envolvido')
    ]


class OcorrenciaForm(forms.ModelForm):
    """
    Formulário do release. Os envolvidos são tratados num formset à parte e
    atribuídos à instância antes da validação.
    """
    data_hora = forms.CharField(
        label="Data/Hora",
        help_text="Formato AAAA-MM-DDTHH:MM ou grupo data-hora (ex: 151630JAN25).",
        widget=forms.TextInput(attrs={'placeholder': 'Ex: 151630JAN25'}),
    )
    cidade = forms.ChoiceField(
        label="Cidade",
        choices=[('', '--- Selecione ---')] + [
            (unidade, [(cidade, cidade) for cidade in cidades])
            for unidade, cidades in CIDADES_POR_UNIDADE.items()
        ],
    )
    material_texto = forms.CharField(
        widget=forms.Textarea(attrs={'rows': 3}),
        required=False,
        label="Material Apreendido",
        help_text="Um item por linha.",
    )
    preliminar = forms.BooleanField(required=False, label="Preliminar")

    class Meta:
        model = Ocorrencia
        fields = [
            'fato', 'fato_complementar', 'unidade', 'cidade', 'data_hora',
            'local_rua', 'local_numero', 'local_bairro', 'oficial', 'resumo', 'motivacao',
        ]
        widgets = {
            'fato': forms.TextInput(attrs={'list': 'fatos-semanais', 'placeholder': 'Ex: ROUBO A PEDESTRE'}),
            'resumo': forms.Textarea(attrs={'rows': 5}),
            'motivacao': forms.TextInput(attrs={'placeholder': 'Desconhecida'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['unidade'].choices = [('', '--- Selecione ---')] + list(Ocorrencia.UNIDADE_CHOICES)

        if self.instance and self.instance.pk:
            self.initial['data_hora'] = timezone.localtime(self.instance.data_hora).strftime('%Y-%m-%dT%H:%M')
            self.initial['material_texto'] = "\n".join(self.instance.material or [])

    def clean_data_hora(self):
        return interpretar_data_hora(self.cleaned_data.get('data_hora'))

    def clean_fato_complementar(self):
        return self.cleaned_data.get('fato_complementar') or None

    def clean_material_texto(self):
        texto = self.cleaned_data.get('material_texto') or ''
        return [linha.strip() for linha in texto.splitlines() if linha.strip()]

    def save(self, commit=True):
        ocorrencia = super().save(commit=False)
        ocorrencia.material = self.cleaned_data.get('material_texto', [])
        if commit:
            ocorrencia.save()
        return ocorrencia
