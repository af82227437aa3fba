"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, adapters de segurança)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: valores lidos de django.conf.settings em get_container()
"""

import importlib
from typing import Optional

from dependency_injector import containers, providers


def _lazy(caminho: str):
    """
    Factory com import tardio.

    Evita importar models Django antes do registro de apps estar pronto.
    """
    modulo, nome = caminho.rsplit('.', 1)

    def criar(*args, **kwargs):
        return getattr(importlib.import_module(modulo), nome)(*args, **kwargs)

    criar.__name__ = nome
    return criar


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings (jwt.*)
    - Repositories: Persistência
    - Unit of Work: Transações
    - Security: hash de senha e tokens
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.chamado_service()
        chamados = service.listar(principal)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    pessoa_repository = providers.Singleton(
        _lazy('src.adapters.django_app.pessoas.repositories.DjangoPessoaRepository')
    )

    chamado_repository = providers.Singleton(
        _lazy('src.adapters.django_app.chamados.repositories.DjangoChamadoRepository')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work.DjangoUnitOfWork')
    )

    # =========================================================================
    # Security
    # =========================================================================

    password_hasher = providers.Singleton(
        _lazy('src.adapters.django_app.shared.security.DjangoPasswordHasher')
    )

    token_service = providers.Singleton(
        _lazy('src.adapters.django_app.shared.security.JoseTokenService'),
        secret=config.jwt.secret,
        algorithm=config.jwt.algorithm,
        expiration_minutes=config.jwt.expiration_minutes,
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    cliente_service = providers.Factory(
        _lazy('src.core.pessoas.use_cases.ClienteService'),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
        hasher=password_hasher,
        vinculos=chamado_repository,
    )

    tecnico_service = providers.Factory(
        _lazy('src.core.pessoas.use_cases.TecnicoService'),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
        hasher=password_hasher,
        vinculos=chamado_repository,
    )

    chamado_service = providers.Factory(
        _lazy('src.core.chamados.use_cases.ChamadoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    autenticacao_service = providers.Factory(
        _lazy('src.core.pessoas.autenticacao.AutenticacaoService'),
        pessoa_repo=pessoa_repository,
        hasher=password_hasher,
        token_service=token_service,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria e configura a partir de django.conf.settings se não existir.
    """
    global _container

    if _container is None:
        from django.conf import settings

        container = Container()
        container.config.from_dict({
            'jwt': {
                'secret': getattr(settings, 'JWT_SECRET', settings.SECRET_KEY),
                'algorithm': getattr(settings, 'JWT_ALGORITHM', 'HS256'),
                'expiration_minutes': getattr(settings, 'JWT_EXPIRATION_MINUTES', 60),
            },
        })
        _container = container

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None
