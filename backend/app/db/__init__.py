"""
Módulo de banco de dados - conexões e sessões.

Exports:
    - Base: Classe base para modelos SQLAlchemy
    - engine: Engine async do SQLAlchemy
    - get_db: Dependency para injeção de sessão
    - async_session_factory: Factory usada fora de requests (seed)
"""

from app.db.session import Base, engine, get_db, async_session_factory

__all__ = [
    "Base",
    "engine",
    "get_db",
    "async_session_factory",
]
