"""
Puerto: Catálogo de bancos.

Define el contrato para reconocer un banco a partir de un texto.
El FieldExtractor lo recibe por constructor y lo usa para:
- Detectar líneas "sueltas" que son solo un nombre de banco ("BCI").
- Descartar esas líneas como candidatas a nombre del titular.
- Reemplazar el texto encontrado por el nombre oficial del banco.

La implementación por defecto es BankRegistry (catálogo estático de
bancos chilenos), pero la interfaz permite otros catálogos (otro país,
un catálogo de prueba en los tests, etc.).
"""

from abc import ABC, abstractmethod

from transfer_parser.domain.models.banco import Banco


class BankCatalog(ABC):
    """Interfaz de búsqueda de bancos. Las búsquedas nunca lanzan
    excepción: "no encontrado" es None."""

    @abstractmethod
    def find_exact(self, text: str | None) -> Banco | None:
        """Busca un banco cuyo nombre oficial o alias sea exactamente el texto.

        La comparación ignora mayúsculas y espacios al inicio/final.
        No hace coincidencias parciales: "Banco Estado Chile" no es
        "Banco Estado".

        Returns:
            El primer Banco del catálogo que coincide, o None.
        """
        ...

    @abstractmethod
    def match_line(self, line: str | None) -> Banco | None:
        """Reconoce una línea de texto como nombre de banco.

        Primero intenta find_exact con la línea tal cual. Si no coincide,
        quita un prefijo "Banco", "Banco de", "Banco del" o "Banco de la"
        y vuelve a intentar una sola vez.

        Returns:
            El Banco reconocido, o None.
        """
        ...
