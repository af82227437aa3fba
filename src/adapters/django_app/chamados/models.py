"""
Django Models para o domínio de Chamados.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/chamados/entities.py.

Técnico e cliente são chaves estrangeiras para PessoaModel com
on_delete=PROTECT: uma pessoa com chamados não pode ser removida.
"""

from django.db import models
from django.utils import timezone

from src.adapters.django_app.pessoas.models import PessoaModel


class ChamadoStatusChoices(models.TextChoices):
    """Choices para status (espelha ChamadoStatus do Core)."""
    ABERTO = 'ABERTO', 'Aberto'
    ANDAMENTO = 'ANDAMENTO', 'Em andamento'
    ENCERRADO = 'ENCERRADO', 'Encerrado'


class ChamadoPrioridadeChoices(models.TextChoices):
    """Choices para prioridade (espelha ChamadoPrioridade do Core)."""
    BAIXA = 'BAIXA', 'Baixa'
    MEDIA = 'MEDIA', 'Média'
    ALTA = 'ALTA', 'Alta'


class ChamadoModel(models.Model):
    """
    Model Django para persistência de Chamados.

    Fields:
        data_abertura: Data de abertura
        data_fechamento: Data de encerramento (null se não encerrado)
        prioridade: BAIXA, MEDIA ou ALTA
        status: ABERTO, ANDAMENTO ou ENCERRADO
        titulo: Título
        observacoes: Texto livre
        tecnico: Técnico responsável
        cliente: Cliente que abriu
    """

    data_abertura = models.DateField(
        default=timezone.localdate,
        help_text="Data de abertura"
    )

    data_fechamento = models.DateField(
        null=True,
        blank=True,
        help_text="Data de encerramento"
    )

    prioridade = models.CharField(
        max_length=10,
        choices=ChamadoPrioridadeChoices.choices,
        default=ChamadoPrioridadeChoices.MEDIA,
        db_index=True,
        help_text="Nível de prioridade"
    )

    status = models.CharField(
        max_length=10,
        choices=ChamadoStatusChoices.choices,
        default=ChamadoStatusChoices.ABERTO,
        db_index=True,
        help_text="Estado atual do chamado"
    )

    titulo = models.CharField(
        max_length=200,
        help_text="Título do chamado"
    )

    observacoes = models.TextField(
        null=True,
        blank=True,
        help_text="Observações"
    )

    tecnico = models.ForeignKey(
        PessoaModel,
        on_delete=models.PROTECT,
        related_name='chamados_atendidos',
        help_text="Técnico responsável"
    )

    cliente = models.ForeignKey(
        PessoaModel,
        on_delete=models.PROTECT,
        related_name='chamados_abertos',
        help_text="Cliente que abriu o chamado"
    )

    class Meta:
        db_table = 'chamados'
        verbose_name = 'Chamado'
        verbose_name_plural = 'Chamados'
        ordering = ['id']

    def __str__(self):
        return f"#{self.pk} {self.titulo}"
