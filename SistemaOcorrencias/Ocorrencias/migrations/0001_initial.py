from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Ocorrencia',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('fato', models.CharField(max_length=255, verbose_name='Fato (Natureza)')),
                ('fato_complementar', models.CharField(blank=True, max_length=255, null=True, verbose_name='Fato Complementar')),
                ('unidade', models.CharField(choices=[('41º BPM', '41º BPM'), ('2ª Cia Ind', '2ª Cia Ind')], max_length=50, verbose_name='Unidade')),
                ('cidade', models.CharField(max_length=100, verbose_name='Cidade')),
                ('data_hora', models.DateTimeField(verbose_name='Data/Hora')),
                ('local_rua', models.CharField(max_length=255, verbose_name='Rua')),
                ('local_numero', models.CharField(max_length=50, verbose_name='Número')),
                ('local_bairro', models.CharField(max_length=255, verbose_name='Bairro')),
                ('envolvidos', models.JSONField(blank=True, default=list, verbose_name='Envolvidos')),
                ('oficial', models.CharField(max_length=255, verbose_name='Oficial')),
                ('material', models.JSONField(blank=True, default=list, verbose_name='Material Apreendido')),
                ('resumo', models.TextField(verbose_name='Resumo do Fato')),
                ('motivacao', models.CharField(blank=True, default='Desconhecida', max_length=255, verbose_name='Motivação')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
            ],
            options={
                'verbose_name': 'Ocorrência',
                'verbose_name_plural': 'Ocorrências',
                'ordering': ['criado_em', 'id'],
            },
        ),
    ]
