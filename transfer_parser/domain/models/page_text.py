"""
Modelo de dominio: Texto extraído de una página.

Puente entre los adaptadores de extracción de texto (archivo .txt,
pdfplumber, OCR) y el FieldExtractor. Un .txt o una captura de pantalla
producen una sola página; un PDF, una por hoja.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageText:
    """Texto extraído de una página individual de un documento."""

    page_num: int
    """Número de página (1-indexed). La primera página es 1, no 0."""

    text: str
    """Texto completo de la página. Puede contener saltos de línea."""

    @property
    def is_empty(self) -> bool:
        """Indica si la página no tiene texto útil."""
        return not self.text.strip()

    @property
    def lines(self) -> list[str]:
        """Devuelve el texto dividido en líneas."""
        return self.text.split("\n")
