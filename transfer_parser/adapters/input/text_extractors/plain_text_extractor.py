"""
Adaptador de entrada: Extractor de archivos de texto plano.

Lee archivos .txt (mensajes guardados, exportes de chat) y los entrega
como una sola PageText. No depende de ninguna librería externa.
"""

from pathlib import Path

from transfer_parser.domain.exceptions import ExtractionError, FormatoInvalidoError
from transfer_parser.domain.models.page_text import PageText
from transfer_parser.domain.ports.text_extractor import TextExtractor
from transfer_parser.domain.shared.text_cleaner import clean_extracted_text


class PlainTextExtractor(TextExtractor):
    """Extrae el contenido completo de un archivo de texto."""

    _EXTENSIONES: tuple[str, ...] = (".txt",)

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Args:
            encoding: Codificación del archivo. Los bytes inválidos se
                      reemplazan en vez de fallar: un carácter raro en
                      un mensaje copiado no debe impedir leer el resto.
        """
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "texto-plano"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self._EXTENSIONES

    def extract(self, file_path: Path) -> list[PageText]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "TXT", "El archivo no existe")

        try:
            raw_text = file_path.read_text(encoding=self._encoding, errors="replace")
        except OSError as e:
            raise ExtractionError(str(file_path), str(e))

        return [PageText(page_num=1, text=clean_extracted_text(raw_text))]
