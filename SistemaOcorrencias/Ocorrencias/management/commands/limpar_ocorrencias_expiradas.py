from django.core.management.base import BaseCommand
from Ocorrencias.models import Ocorrencia


class Command(BaseCommand):
    help = 'Apaga as ocorrências com mais de 24 horas que não pertencem aos fatos do resumo semanal.'

    def handle(self, *args, **options):
        total = Ocorrencia.objects.limpar_expiradas()
        self.stdout.write(self.style.SUCCESS(f'{total} ocorrência(s) expirada(s) apagada(s).'))
