"""
Puerto de entrada: Extractor de texto.

Todo lo que no llega como texto pegado pasa por aquí. Un adaptador por
tipo de archivo:

    TextExtractor (interfaz)
    ├── PlainTextExtractor     → .txt (mensajes guardados, exportes de chat)
    ├── PdfplumberExtractor    → PDFs nativos (certificados de cuenta)
    └── OcrExtractor           → PDFs escaneados y capturas de pantalla

El TransferProcessor recibe una lista ordenada de extractores y prueba
los que aceptan el archivo hasta que alguno obtiene texto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from transfer_parser.domain.models.page_text import PageText


class TextExtractor(ABC):
    """Obtiene el texto de un archivo, separado por páginas."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """True si el archivo es de un tipo que este adaptador sabe leer.

        Se decide por la extensión, sin abrir el archivo.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[PageText]:
        """Lee el archivo y devuelve sus páginas.

        Un .txt o una imagen producen una sola PageText. Una lista con
        solo páginas vacías significa "no hay texto aquí" y hace que se
        pruebe el siguiente extractor.

        Raises:
            ExtractionError: Archivo ilegible o librería/binario ausente.
            FormatoInvalidoError: Archivo inexistente o de otro tipo.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Identificador corto para la bitácora: 'texto-plano',
        'pdfplumber', 'ocr-tesseract'."""
        ...
