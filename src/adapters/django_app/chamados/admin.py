"""
Django Admin para o domínio de Chamados.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import ChamadoModel


@admin.register(ChamadoModel)
class ChamadoAdmin(admin.ModelAdmin):
    """Admin para ChamadoModel."""

    list_display = [
        'id',
        'titulo',
        'status_badge',
        'prioridade_badge',
        'tecnico',
        'cliente',
        'data_abertura',
        'data_fechamento',
    ]

    list_filter = [
        'status',
        'prioridade',
        'data_abertura',
    ]

    search_fields = [
        'titulo',
        'observacoes',
        'tecnico__nome',
        'cliente__nome',
    ]

    readonly_fields = [
        'id',
        'data_abertura',
        'data_fechamento',
    ]

    list_select_related = ['tecnico', 'cliente']

    ordering = ['-data_abertura', '-id']

    @admin.display(description='Status', ordering='status')
    def status_badge(self, obj):
        colors = {
            'ABERTO': '#0d6efd',
            'ANDAMENTO': '#fd7e14',
            'ENCERRADO': '#198754',
        }
        return format_html(
            '<span style="background:{};color:#fff;padding:2px 8px;border-radius:4px">{}</span>',
            colors.get(obj.status, '#6c757d'),
            obj.get_status_display(),
        )

    @admin.display(description='Prioridade', ordering='prioridade')
    def prioridade_badge(self, obj):
        colors = {
            'BAIXA': '#6c757d',
            'MEDIA': '#ffc107',
            'ALTA': '#dc3545',
        }
        return format_html(
            '<span style="color:{};font-weight:bold">{}</span>',
            colors.get(obj.prioridade, '#6c757d'),
            obj.get_prioridade_display(),
        )
