"""
Modelos de dominio del proyecto transfer-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from transfer_parser.domain.models import DatosTransferencia, Banco
"""

from transfer_parser.domain.models.banco import Banco
from transfer_parser.domain.models.datos_transferencia import (
    CAMPOS_CANONICOS,
    DatosTransferencia,
)
from transfer_parser.domain.models.page_text import PageText
from transfer_parser.domain.models.patron_etiqueta import PatronEtiqueta
from transfer_parser.domain.models.resultado_extraccion import ResultadoExtraccion

__all__ = [
    "CAMPOS_CANONICOS",
    "Banco",
    "DatosTransferencia",
    "PageText",
    "PatronEtiqueta",
    "ResultadoExtraccion",
]
