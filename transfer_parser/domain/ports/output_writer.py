"""
Puerto de salida: Escritor de resultados.

Define el contrato para exportar los datos extraídos de varias entradas
a un archivo (hoy Excel). El texto canónico y el JSON de una sola
entrada los imprime directamente el CLI.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from transfer_parser.domain.models.resultado_extraccion import ResultadoExtraccion


class OutputWriter(ABC):
    """Interfaz para exportar resultados de extracción."""

    @abstractmethod
    def write(self, resultados: list[ResultadoExtraccion], output_path: Path) -> Path:
        """Escribe todos los resultados en un archivo.

        Args:
            resultados: Resultados de una o más entradas.
            output_path: Ruta donde crear el archivo.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si no hay resultados o falla la escritura.
        """
        ...
