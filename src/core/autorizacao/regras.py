"""
Motor de Regras de Autorização.

Decide, a partir do Principal, da ação e do recurso, se a operação é
permitida. A tabela de regras é declarativa: cada par
(tipo de recurso, ação) aponta para um predicado e para a mensagem de
negação, o que permite auditar todas as regras em um único lugar.

Precedência:
1. Sem principal → não autenticado, para qualquer ação
2. Regra da tabela para (tipo, ação)

Listagens não são negadas: são filtradas na origem via
escopo_listagem().

Example:
    decisao = autorizar(principal, Acao.LER, Recurso.chamado(5, cliente_id=3, tecnico_id=1))
    if not decisao.permitido:
        ...

    exigir_autorizacao(principal, Acao.EXCLUIR, Recurso.cliente(7))  # levanta se negado
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from src.core.shared.exceptions import AuthenticationError, AuthorizationError
from src.core.shared.principal import Perfil, Principal


MOTIVO_NAO_AUTENTICADO = "Usuário não autenticado."


class Acao(Enum):
    LER = "ler"
    LISTAR = "listar"
    CRIAR = "criar"
    ATUALIZAR = "atualizar"
    EXCLUIR = "excluir"


class TipoRecurso(Enum):
    CLIENTE = "Cliente"
    TECNICO = "Técnico"
    CHAMADO = "Chamado"


@dataclass(frozen=True)
class Recurso:
    """
    Alvo de uma ação.

    Attributes:
        tipo: Cliente, Técnico ou Chamado
        id: Id do registro (None em criação/listagem)
        cliente_id: Dono do chamado (apenas chamados)
        tecnico_id: Técnico responsável (apenas chamados)
    """

    tipo: TipoRecurso
    id: Optional[int] = None
    cliente_id: Optional[int] = None
    tecnico_id: Optional[int] = None

    @classmethod
    def cliente(cls, id: Optional[int] = None) -> "Recurso":
        return cls(TipoRecurso.CLIENTE, id)

    @classmethod
    def tecnico(cls, id: Optional[int] = None) -> "Recurso":
        return cls(TipoRecurso.TECNICO, id)

    @classmethod
    def chamado(
        cls,
        id: Optional[int] = None,
        cliente_id: Optional[int] = None,
        tecnico_id: Optional[int] = None,
    ) -> "Recurso":
        return cls(TipoRecurso.CHAMADO, id, cliente_id, tecnico_id)


@dataclass(frozen=True)
class Decisao:
    """Resultado de uma checagem de autorização."""

    permitido: bool
    motivo: str = ""
    autenticado: bool = True

    @classmethod
    def permitir(cls) -> "Decisao":
        return cls(True)

    @classmethod
    def negar(cls, motivo: str, autenticado: bool = True) -> "Decisao":
        return cls(False, motivo, autenticado)


@dataclass(frozen=True)
class Regra:
    """Predicado de permissão + mensagem usada quando o predicado falha."""

    permite: Callable[[Principal, Recurso], bool]
    motivo: str


# =============================================================================
# PREDICADOS
# =============================================================================

def _qualquer_autenticado(principal: Principal, recurso: Recurso) -> bool:
    return True


def _apenas_admin(principal: Principal, recurso: Recurso) -> bool:
    return principal.is_admin


def _admin_ou_tecnico(principal: Principal, recurso: Recurso) -> bool:
    return principal.has_any(Perfil.ADMIN, Perfil.TECNICO)


def _admin_tecnico_ou_proprio(principal: Principal, recurso: Recurso) -> bool:
    return _admin_ou_tecnico(principal, recurso) or recurso.id == principal.id


def _admin_tecnico_ou_dono(principal: Principal, recurso: Recurso) -> bool:
    return _admin_ou_tecnico(principal, recurso) or recurso.cliente_id == principal.id


def _qualquer_perfil(principal: Principal, recurso: Recurso) -> bool:
    return principal.has_any(Perfil.ADMIN, Perfil.TECNICO, Perfil.CLIENTE)


TABELA_DE_REGRAS: Dict[Tuple[TipoRecurso, Acao], Regra] = {
    # Clientes
    (TipoRecurso.CLIENTE, Acao.LER): Regra(
        _admin_tecnico_ou_proprio,
        "Acesso negado! Cliente só pode ver seus próprios dados.",
    ),
    (TipoRecurso.CLIENTE, Acao.LISTAR): Regra(_qualquer_autenticado, ""),
    (TipoRecurso.CLIENTE, Acao.CRIAR): Regra(
        _apenas_admin,
        "Acesso negado! Apenas administradores podem cadastrar clientes.",
    ),
    (TipoRecurso.CLIENTE, Acao.ATUALIZAR): Regra(
        _apenas_admin,
        "Acesso negado! Apenas administradores podem atualizar clientes.",
    ),
    (TipoRecurso.CLIENTE, Acao.EXCLUIR): Regra(
        _apenas_admin,
        "Acesso negado! Apenas administradores podem deletar clientes.",
    ),
    # Técnicos
    (TipoRecurso.TECNICO, Acao.LER): Regra(_qualquer_autenticado, ""),
    (TipoRecurso.TECNICO, Acao.LISTAR): Regra(_qualquer_autenticado, ""),
    (TipoRecurso.TECNICO, Acao.CRIAR): Regra(_qualquer_autenticado, ""),
    (TipoRecurso.TECNICO, Acao.ATUALIZAR): Regra(
        _apenas_admin,
        "Acesso negado! Apenas administradores podem atualizar técnicos.",
    ),
    (TipoRecurso.TECNICO, Acao.EXCLUIR): Regra(
        _apenas_admin,
        "Acesso negado! Apenas administradores podem deletar técnicos.",
    ),
    # Chamados
    (TipoRecurso.CHAMADO, Acao.LER): Regra(
        _admin_tecnico_ou_dono,
        "Acesso negado! Você só pode visualizar seus próprios chamados.",
    ),
    (TipoRecurso.CHAMADO, Acao.LISTAR): Regra(_qualquer_autenticado, ""),
    (TipoRecurso.CHAMADO, Acao.CRIAR): Regra(
        _qualquer_perfil,
        "Acesso negado! Perfil sem permissão para abrir chamados.",
    ),
    (TipoRecurso.CHAMADO, Acao.ATUALIZAR): Regra(
        _admin_ou_tecnico,
        "Acesso negado! Apenas técnicos ou administradores podem atualizar chamados.",
    ),
    (TipoRecurso.CHAMADO, Acao.EXCLUIR): Regra(
        _apenas_admin,
        "Acesso negado. Apenas administradores podem excluir chamados.",
    ),
}


def autorizar(principal: Optional[Principal], acao: Acao, recurso: Recurso) -> Decisao:
    """
    Decide se o principal pode executar a ação sobre o recurso.

    Função pura: não consulta repositórios nem estado global.

    Args:
        principal: Usuário autenticado (None se anônimo)
        acao: Operação pretendida
        recurso: Alvo da operação

    Returns:
        Decisao com permitido/motivo
    """
    if principal is None:
        return Decisao.negar(MOTIVO_NAO_AUTENTICADO, autenticado=False)

    regra = TABELA_DE_REGRAS[(recurso.tipo, acao)]
    if regra.permite(principal, recurso):
        return Decisao.permitir()
    return Decisao.negar(regra.motivo)


def exigir_autenticacao(principal: Optional[Principal]) -> Principal:
    """
    Garante que há um principal, antes de qualquer consulta.

    Raises:
        AuthenticationError: Sem principal
    """
    if principal is None:
        raise AuthenticationError(MOTIVO_NAO_AUTENTICADO)
    return principal


def exigir_autorizacao(
    principal: Optional[Principal],
    acao: Acao,
    recurso: Recurso,
) -> Principal:
    """
    Versão de autorizar() que levanta exceção quando negado.

    Returns:
        O próprio principal (garantidamente não-None)

    Raises:
        AuthenticationError: Sem principal
        AuthorizationError: Principal sem permissão
    """
    decisao = autorizar(principal, acao, recurso)
    if not decisao.autenticado:
        raise AuthenticationError(decisao.motivo)
    if not decisao.permitido:
        raise AuthorizationError(decisao.motivo)
    return principal


@dataclass(frozen=True)
class EscopoListagem:
    """
    Filtro aplicado na origem de uma listagem.

    todos=True dispensa filtros; caso contrário, cliente_id ou
    tecnico_id restringem o resultado.
    """

    todos: bool = False
    cliente_id: Optional[int] = None
    tecnico_id: Optional[int] = None


def escopo_listagem(principal: Optional[Principal], tipo: TipoRecurso) -> EscopoListagem:
    """
    Calcula o filtro de listagem para o principal.

    - Clientes: ADMIN/TECNICO veem todos; cliente comum vê apenas o próprio registro
    - Técnicos: todos
    - Chamados: ADMIN vê todos; TECNICO os atribuídos a ele; cliente os próprios

    Raises:
        AuthenticationError: Sem principal
    """
    exigir_autenticacao(principal)

    if tipo is TipoRecurso.TECNICO:
        return EscopoListagem(todos=True)

    if tipo is TipoRecurso.CLIENTE:
        if principal.is_cliente_apenas:
            return EscopoListagem(cliente_id=principal.id)
        return EscopoListagem(todos=True)

    if principal.is_admin:
        return EscopoListagem(todos=True)
    if principal.is_tecnico:
        return EscopoListagem(tecnico_id=principal.id)
    return EscopoListagem(cliente_id=principal.id)
