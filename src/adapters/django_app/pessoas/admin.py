"""
Django Admin para o domínio de Pessoas.
"""

from django.contrib import admin

from .models import PessoaModel


@admin.register(PessoaModel)
class PessoaAdmin(admin.ModelAdmin):
    """Admin para PessoaModel (o hash da senha não é editável)."""

    list_display = [
        'id',
        'nome',
        'tipo',
        'cpf',
        'email',
        'perfis_display',
        'data_criacao',
    ]

    list_filter = [
        'tipo',
        'data_criacao',
    ]

    search_fields = [
        'nome',
        'cpf',
        'email',
    ]

    readonly_fields = [
        'id',
        'senha',
        'data_criacao',
    ]

    ordering = ['id']

    @admin.display(description='Perfis')
    def perfis_display(self, obj):
        return ", ".join(obj.perfis or [])
