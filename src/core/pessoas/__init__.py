"""
Domínio de Pessoas (clientes e técnicos).

Exports principais:
- PessoaEntity, TipoPessoa
- PessoaRepository, InMemoryPessoaRepository
- ClienteService, TecnicoService
- AutenticacaoService
"""

from .entities import PessoaEntity, TipoPessoa
from .ports import PessoaRepository, InMemoryPessoaRepository, VinculoChamados
from .dtos import PessoaInputDTO, PessoaOutputDTO
from .integridade import validar_unicidade, precisa_revalidar
from .use_cases import ClienteService, TecnicoService
from .autenticacao import AutenticacaoService

__all__ = [
    "PessoaEntity",
    "TipoPessoa",
    "PessoaRepository",
    "InMemoryPessoaRepository",
    "VinculoChamados",
    "PessoaInputDTO",
    "PessoaOutputDTO",
    "validar_unicidade",
    "precisa_revalidar",
    "ClienteService",
    "TecnicoService",
    "AutenticacaoService",
]
