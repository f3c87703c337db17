"""
Rate limiting usando Redis com janela fixa por IP.

Configurável via variáveis de ambiente:
    - RATE_LIMIT_ENABLED: bool (default: True) - Habilita/desabilita rate limiting
    - RATE_LIMIT_REQUESTS: int (default: 60) - Número de requests permitidos
    - RATE_LIMIT_WINDOW_SECONDS: int (default: 60) - Janela de tempo em segundos

Uso:
    @router.post("/endpoint")
    async def endpoint(
        _: None = Depends(RateLimiter(requests=30, window=60)),
    ):
        ...
"""

from typing import Optional

from fastapi import HTTPException, Request, status

from app.core.config import get_settings
from app.core.logging import get_logger
from app.db import redis as redis_db

logger = get_logger(__name__)
settings = get_settings()


class RateLimiter:
    """
    Dependency para rate limiting usando Redis.

    Args:
        requests: Número máximo de requests permitidos (default: config)
        window: Janela de tempo em segundos (default: config)
        key_prefix: Prefixo para a chave no Redis (default: "rate_limit")
    """

    def __init__(
        self,
        requests: Optional[int] = None,
        window: Optional[int] = None,
        key_prefix: str = "rate_limit",
    ):
        self.requests = requests or settings.RATE_LIMIT_REQUESTS
        self.window = window or settings.RATE_LIMIT_WINDOW_SECONDS
        self.key_prefix = key_prefix

    async def __call__(self, request: Request) -> None:
        """
        Verifica rate limit do IP de origem.

        Raises:
            HTTPException 429: Rate limit excedido
        """
        if not settings.RATE_LIMIT_ENABLED:
            return

        client = redis_db.redis_client
        # Se Redis não disponível, permite passagem (fail-open)
        if client is None:
            return

        key = f"{self.key_prefix}:{self._get_identifier(request)}"

        try:
            current = await client.incr(key)

            if current == 1:
                await client.expire(key, self.window)

            if current > self.requests:
                ttl = await client.ttl(key)
                raise HTTPException(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail=f"Rate limit excedido. Tente novamente em {ttl} segundos.",
                    headers={"Retry-After": str(ttl)},
                )
        except HTTPException:
            raise
        except Exception as e:
            logger.warning(f"Rate limit ignorado, erro no Redis: {e}")

    @staticmethod
    def _get_identifier(request: Request) -> str:
        """IP do cliente, respeitando X-Forwarded-For quando atrás de proxy."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return f"ip:{forwarded.split(',')[0].strip()}"
        client_ip = request.client.host if request.client else "unknown"
        return f"ip:{client_ip}"


rate_limit_strict = RateLimiter(requests=30, window=60)
