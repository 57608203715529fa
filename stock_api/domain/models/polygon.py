from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel


class PolygonAggregate(BaseModel):
    """Barra agregada retornada pelo provedor (t em milissegundos desde epoch)."""
    t: int
    o: Decimal
    h: Decimal
    l: Decimal  # noqa: E741
    c: Decimal
    v: Decimal


class PolygonResponse(BaseModel):
    """Resposta do endpoint de agregados do provedor."""
    results: Optional[List[PolygonAggregate]] = None
