"""
Modelo de dominio: Patrón de etiqueta.

Asocia un campo de DatosTransferencia con el regex que reconoce su
etiqueta seguida de ':' (ej: "Nombre del titular:", "R.U.T.:").
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PatronEtiqueta:
    """Etiqueta reconocible para un campo."""

    campo: str
    """Nombre del atributo de DatosTransferencia que llena esta etiqueta."""

    patron: re.Pattern[str]
    """Regex compilado con re.IGNORECASE. Incluye el separador ':'."""

    def buscar(self, texto: str) -> re.Match[str] | None:
        """Primera aparición de la etiqueta en cualquier parte del texto."""
        return self.patron.search(texto)

    def inicia_linea(self, linea: str) -> bool:
        """True si la línea comienza con esta etiqueta."""
        return self.patron.match(linea) is not None
