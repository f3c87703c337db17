"""
Filtros tipados e paginação compartilhados por todos os services.

Cada service declara um mapa `field_types` (campo -> FieldType) que funciona
como allow-list dos campos aceitos em `filter_field`. O valor recebido na
query string é convertido para o tipo declarado antes de virar cláusula SQL.
"""

import enum
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, and_

from app.core.errors import ObjectInvalidQueryFilters
from app.core.scheduling import to_local_naive

NO_LIMIT = "none"


class FieldType(str, enum.Enum):
    """Tipos de campo aceitos em filtros."""
    STRING = "String"
    NUMBER = "Number"
    DATE = "Date"
    IDENTIFIER = "ObjectId"


@dataclass(frozen=True)
class Pagination:
    """Parâmetros de paginação já validados."""
    page: int
    limit: int | None

    def page_size(self, total: int) -> int:
        """Tamanho da página; sem limite, a página tem todos os registros."""
        return self.limit if self.limit is not None else total

    def offset(self, total: int) -> int:
        """Registros pulados antes da página atual."""
        return (self.page - 1) * self.page_size(total)

    def metadata(self, total: int) -> dict[str, int]:
        """Monta o bloco `pagination` da resposta."""
        page_size = self.page_size(total)
        total_pages = math.ceil(total / page_size) if page_size else 0
        return {
            "totalItems": total,
            "totalPages": total_pages,
            "currentPage": self.page,
            "pageSize": page_size,
        }


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_pagination(page: Any, limit: Any, entity: str) -> Pagination:
    """
    Valida page/limit vindos da query string.

    `limit` aceita o sentinela "none" para retornar todos os registros.

    Raises:
        ObjectInvalidQueryFilters: page < 1, limit < 1 ou valores não numéricos
    """
    page_number = _to_int(page)
    if page_number is None or page_number < 1:
        raise ObjectInvalidQueryFilters(entity)

    if isinstance(limit, str) and limit.strip().lower() == NO_LIMIT:
        return Pagination(page=page_number, limit=None)

    limit_number = _to_int(limit)
    if limit_number is None or limit_number < 1:
        raise ObjectInvalidQueryFilters(entity)

    return Pagination(page=page_number, limit=limit_number)


def escape_like(value: str) -> str:
    """Escapa os curingas do LIKE para que o valor seja comparado literalmente."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_pattern(value: str) -> str:
    """Padrão `%valor%` usado em buscas parciais case insensitive."""
    return f"%{escape_like(value)}%"


def _parse_date_value(value: str) -> tuple[datetime, datetime] | datetime | None:
    raw = value.strip()
    try:
        if len(raw) == 10:
            day = date.fromisoformat(raw)
            start = datetime.combine(day, datetime.min.time())
            return start, start + timedelta(days=1)
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def _align_timezone(column: Any, value: datetime) -> datetime:
    """
    Ajusta o valor ao tipo da coluna: colunas sem timezone guardam horário
    local; colunas com timezone recebem valores sem tzinfo como UTC.
    """
    if getattr(column.type, "timezone", False):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    return to_local_naive(value)


def build_filter(
    model: Any,
    field_types: dict[str, FieldType],
    field: str,
    value: str,
    entity: str,
) -> ColumnElement[bool]:
    """
    Converte (campo, valor) em cláusula SQLAlchemy conforme o tipo declarado.

    - STRING: busca parcial case insensitive
    - NUMBER: igualdade numérica
    - DATE: dia inteiro quando o valor é `YYYY-MM-DD`, igualdade caso contrário
    - IDENTIFIER: igualdade de UUID (campos `x` são mapeados para `x_id`)

    Raises:
        ObjectInvalidQueryFilters: campo fora da allow-list ou valor inválido
    """
    field_type = field_types.get(field)
    if field_type is None or value is None:
        raise ObjectInvalidQueryFilters(entity)

    if field_type is FieldType.IDENTIFIER:
        column_name = f"{field}_id" if hasattr(model, f"{field}_id") else field
        column = getattr(model, column_name)
        try:
            return column == UUID(str(value))
        except ValueError:
            raise ObjectInvalidQueryFilters(entity)

    column = getattr(model, field)

    if field_type is FieldType.STRING:
        return column.ilike(contains_pattern(str(value)), escape="\\")

    if field_type is FieldType.NUMBER:
        number = _to_int(value)
        if number is None:
            raise ObjectInvalidQueryFilters(entity)
        return column == number

    parsed = _parse_date_value(str(value))
    if parsed is None:
        raise ObjectInvalidQueryFilters(entity)
    if isinstance(parsed, tuple):
        start, end = parsed
        if column.type.python_type is date:
            return and_(column >= start.date(), column < end.date())
        return and_(column >= _align_timezone(column, start), column < _align_timezone(column, end))
    if column.type.python_type is date:
        return column == parsed.date()
    return column == _align_timezone(column, parsed)
