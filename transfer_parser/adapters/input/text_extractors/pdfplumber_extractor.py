"""
Adaptador de entrada: PDFs con texto embebido (pdfplumber).

Cubre los documentos que emiten los propios bancos: el "certificado de
cuenta", la cartola con los datos del titular o el comprobante que se
descarga desde la app. Cada hoja del PDF se convierte en un PageText.

Si el PDF es una imagen escaneada, pdfplumber devuelve hojas vacías y el
TransferProcessor pasa al siguiente extractor (OCR, si está habilitado).
"""

from pathlib import Path

from transfer_parser.domain.exceptions import ExtractionError, FormatoInvalidoError
from transfer_parser.domain.models.page_text import PageText
from transfer_parser.domain.ports.text_extractor import TextExtractor
from transfer_parser.domain.shared.text_cleaner import clean_extracted_text

# Opcional: sin pdfplumber el CLI sigue funcionando con stdin y .txt
try:
    import pdfplumber
except ImportError:
    pdfplumber = None  # type: ignore[assignment]


class PdfplumberExtractor(TextExtractor):
    """Lee el texto embebido de un PDF, hoja por hoja."""

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        # Solo mira la extensión: saber si hay texto requiere abrirlo.
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Devuelve una PageText por hoja, incluidas las hojas en blanco.

        Raises:
            ExtractionError: pdfplumber ausente, PDF sin hojas, cifrado o
                            ilegible.
            FormatoInvalidoError: El archivo no existe o no es .pdf.
        """
        if pdfplumber is None:
            raise ExtractionError(
                str(file_path),
                "falta la librería pdfplumber (pip install pdfplumber)",
            )
        self._validar_archivo(file_path)

        try:
            with pdfplumber.open(file_path) as pdf:
                hojas = list(pdf.pages)
                if not hojas:
                    raise ExtractionError(str(file_path), "el PDF está vacío")
                return [
                    PageText(page_num=numero, text=clean_extracted_text(hoja.extract_text() or ""))
                    for numero, hoja in enumerate(hojas, start=1)
                ]
        except ExtractionError:
            raise
        except Exception as e:
            # pdfminer no tiene una excepción base común para sus errores.
            detalle = str(e).lower()
            if "password" in detalle or "encrypt" in detalle:
                raise ExtractionError(str(file_path), "el PDF pide contraseña")
            raise ExtractionError(str(file_path), f"no se pudo leer el PDF: {e}")

    @staticmethod
    def _validar_archivo(file_path: Path) -> None:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "PDF", "El archivo no existe")
        if file_path.suffix.lower() != ".pdf":
            raise FormatoInvalidoError(
                str(file_path), "PDF", f"extensión '{file_path.suffix}'"
            )
