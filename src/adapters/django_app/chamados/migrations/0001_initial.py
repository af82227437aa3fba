"""
Migration inicial para o domínio de Chamados.

Cria a tabela:
- chamados: Chamados com referência protegida a técnico e cliente
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('pessoas', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ChamadoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True,
                    primary_key=True,
                    serialize=False,
                    verbose_name='ID'
                )),
                ('data_abertura', models.DateField(
                    default=django.utils.timezone.localdate,
                    help_text='Data de abertura'
                )),
                ('data_fechamento', models.DateField(
                    null=True,
                    blank=True,
                    help_text='Data de encerramento'
                )),
                ('prioridade', models.CharField(
                    max_length=10,
                    choices=[
                        ('BAIXA', 'Baixa'),
                        ('MEDIA', 'Média'),
                        ('ALTA', 'Alta'),
                    ],
                    default='MEDIA',
                    db_index=True,
                    help_text='Nível de prioridade'
                )),
                ('status', models.CharField(
                    max_length=10,
                    choices=[
                        ('ABERTO', 'Aberto'),
                        ('ANDAMENTO', 'Em andamento'),
                        ('ENCERRADO', 'Encerrado'),
                    ],
                    default='ABERTO',
                    db_index=True,
                    help_text='Estado atual do chamado'
                )),
                ('titulo', models.CharField(
                    max_length=200,
                    help_text='Título do chamado'
                )),
                ('observacoes', models.TextField(
                    null=True,
                    blank=True,
                    help_text='Observações'
                )),
                ('tecnico', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='chamados_atendidos',
                    to='pessoas.pessoamodel',
                    help_text='Técnico responsável'
                )),
                ('cliente', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='chamados_abertos',
                    to='pessoas.pessoamodel',
                    help_text='Cliente que abriu o chamado'
                )),
            ],
            options={
                'db_table': 'chamados',
                'verbose_name': 'Chamado',
                'verbose_name_plural': 'Chamados',
                'ordering': ['id'],
            },
        ),
    ]
