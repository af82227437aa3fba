"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, python-jose, etc.)
- 100% testável sem banco de dados
- Regras de autorização e integridade centralizadas
"""
