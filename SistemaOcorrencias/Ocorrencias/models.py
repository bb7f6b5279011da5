import logging
from datetime import timedelta

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from .constantes import (
    CIDADES_POR_UNIDADE,
    FATOS_SEMANAIS,
    JANELA_RPI_HORAS,
    MOTIVACAO_PADRAO,
    UNIDADES,
)
from .schemas import Envolvido

logger = logging.getLogger(__name__)


class OcorrenciaQuerySet(models.QuerySet):

    def expiradas(self, agora=None):
        """Ocorrências fora dos fatos semanais com mais de 24 horas."""
        agora = agora or timezone.now()
        limite = agora - timedelta(hours=JANELA_RPI_HORAS)
        return self.exclude(fato__in=FATOS_SEMANAIS).filter(data_hora__lt=limite)


class OcorrenciaManager(models.Manager.from_queryset(OcorrenciaQuerySet)):

    def limpar_expiradas(self, agora=None):
        """Apaga as ocorrências expiradas e retorna quantas foram apagadas."""
        total, _ = self.get_queryset().expiradas(agora=agora).delete()
        if total:
            logger.info(f"Limpeza automática: {total} ocorrência(s) expirada(s) apagada(s).")
        return total

    def listar(self, agora=None):
        """
        Lista as ocorrências em ordem de criação. Antes da leitura, apaga as
        expiradas; se a limpeza falhar o erro é registrado e a lista é
        retornada mesmo assim.
        """
        try:
            self.limpar_expiradas(agora=agora)
        except Exception:
            logger.exception("Erro ao apagar ocorrências expiradas.")
        return list(self.get_queryset().order_by('criado_em', 'id'))


class Ocorrencia(models.Model):
    UNIDADE_CHOICES = [(unidade, unidade) for unidade in UNIDADES]

    fato = models.CharField(max_length=255, verbose_name="Fato (Natureza)")
    fato_complementar = models.CharField(max_length=255, null=True, blank=True, verbose_name="Fato Complementar")
    unidade = models.CharField(max_length=50, choices=UNIDADE_CHOICES, verbose_name="Unidade")
    cidade = models.CharField(max_length=100, verbose_name="Cidade")
    data_hora = models.DateTimeField(verbose_name="Data/Hora")
    local_rua = models.CharField(max_length=255, verbose_name="Rua")
    local_numero = models.CharField(max_length=50, verbose_name="Número")
    local_bairro = models.CharField(max_length=255, verbose_name="Bairro")
    envolvidos = models.JSONField(default=list, blank=True, verbose_name="Envolvidos")
    oficial = models.CharField(max_length=255, verbose_name="Oficial")
    material = models.JSONField(default=list, blank=True, verbose_name="Material Apreendido")
    resumo = models.TextField(verbose_name="Resumo do Fato")
    motivacao = models.CharField(max_length=255, default=MOTIVACAO_PADRAO, blank=True, verbose_name="Motivação")
    criado_em = models.DateTimeField(auto_now_add=True, verbose_name="Criado em")

    objects = OcorrenciaManager()

    def __str__(self):
        return f"{self.fato} - {self.cidade}"

    def clean(self):
        super().clean()
        cidades = CIDADES_POR_UNIDADE.get(self.unidade, [])
        if self.unidade and self.cidade and self.cidade not in cidades:
            raise ValidationError({'cidade': f"A cidade '{self.cidade}' não pertence à unidade '{self.unidade}'."})

        if not self.motivacao:
            self.motivacao = MOTIVACAO_PADRAO

        try:
            self.envolvidos = [Envolvido.model_validate(e).para_banco() for e in (self.envolvidos or [])]
        except ValueError as e:
            raise ValidationError({'envolvidos': str(e)})

    def to_dict(self):
        """Representação usada pela API (chaves em camelCase)."""
        return {
            'id': self.pk,
            'fato': self.fato,
            'fatoComplementar': self.fato_complementar or None,
            'unidade': self.unidade,
            'cidade': self.cidade,
            'dataHora': self.data_hora.isoformat() if self.data_hora else None,
            'localRua': self.local_rua,
            'localNumero': self.local_numero,
            'localBairro': self.local_bairro,
            'envolvidos': [Envolvido.model_validate(e).para_api() for e in self.envolvidos or []],
            'oficial': self.oficial,
            'material': list(self.material or []),
            'resumo': self.resumo,
            'motivacao': self.motivacao,
            'createdAt': self.criado_em.isoformat() if self.criado_em else None,
        }

    class Meta:
        ordering = ['criado_em', 'id']
        verbose_name = "Ocorrência"
        verbose_name_plural = "Ocorrências"
