"""
Schemas Pydantic para o endpoint de healthcheck.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Resposta do endpoint de healthcheck.

    Attributes:
        status: Status da aplicação ("healthy" ou "degraded")
        app_name: Nome da aplicação
        environment: Ambiente atual (development, staging, production)
        database: Conexão com o PostgreSQL
        redis: Conexão com o Redis
    """

    status: str
    app_name: str
    environment: str
    database: bool
    redis: bool

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "app_name": "Vindex Library API",
                    "environment": "development",
                    "database": True,
                    "redis": True,
                }
            ]
        }
    }
