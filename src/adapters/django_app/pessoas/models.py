"""
Django Models para o domínio de Pessoas.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/pessoas/entities.py.

Clientes e técnicos ficam na mesma tabela, diferenciados por `tipo`,
para que as restrições UNIQUE de CPF e e-mail valham entre os dois.
"""

from django.db import models
from django.utils import timezone


class TipoPessoaChoices(models.TextChoices):
    """Choices para tipo de pessoa (espelha TipoPessoa do Core)."""
    CLIENTE = 'CLIENTE', 'Cliente'
    TECNICO = 'TECNICO', 'Técnico'


class PessoaModel(models.Model):
    """
    Model Django para persistência de Clientes e Técnicos.

    Fields:
        tipo: CLIENTE ou TECNICO
        nome: Nome completo
        cpf: CPF (único)
        email: E-mail de login (único)
        senha: Hash da senha
        perfis: Lista de nomes de perfis (JSONField)
        data_criacao: Data de cadastro
    """

    tipo = models.CharField(
        max_length=10,
        choices=TipoPessoaChoices.choices,
        db_index=True,
        help_text="Cliente ou Técnico"
    )

    nome = models.CharField(
        max_length=200,
        help_text="Nome completo"
    )

    cpf = models.CharField(
        max_length=20,
        unique=True,
        help_text="CPF, único entre clientes e técnicos"
    )

    email = models.CharField(
        max_length=254,
        unique=True,
        help_text="E-mail de login, único entre clientes e técnicos"
    )

    senha = models.CharField(
        max_length=255,
        help_text="Hash da senha"
    )

    perfis = models.JSONField(
        default=list,
        help_text="Nomes dos perfis (ADMIN, CLIENTE, TECNICO)"
    )

    data_criacao = models.DateField(
        default=timezone.localdate,
        help_text="Data de cadastro"
    )

    class Meta:
        db_table = 'pessoas'
        verbose_name = 'Pessoa'
        verbose_name_plural = 'Pessoas'
        ordering = ['id']

    def __str__(self):
        return f"{self.get_tipo_display()} #{self.pk} {self.nome}"
