"""
Domínio de Autorização.

Todas as decisões de acesso por perfil passam por aqui. Os serviços
nunca testam perfis diretamente.
"""

from .regras import (
    Acao,
    TipoRecurso,
    Recurso,
    Decisao,
    Regra,
    TABELA_DE_REGRAS,
    EscopoListagem,
    autorizar,
    exigir_autenticacao,
    exigir_autorizacao,
    escopo_listagem,
)

__all__ = [
    "Acao",
    "TipoRecurso",
    "Recurso",
    "Decisao",
    "Regra",
    "TABELA_DE_REGRAS",
    "EscopoListagem",
    "autorizar",
    "exigir_autenticacao",
    "exigir_autorizacao",
    "escopo_listagem",
]
