"""
Adaptador de entrada: OCR con Tesseract.

Dos usos:
- Capturas de pantalla (.png, .jpg, .jpeg). Es la forma más común de
  compartir los datos de una cuenta desde la app del banco.
- PDFs escaneados, cuando pdfplumber no encontró texto. Por eso se
  registra DESPUÉS de PdfplumberExtractor.

Un PDF se rasteriza con pdf2image (requiere poppler); una imagen se abre
con Pillow. Luego pytesseract lee cada imagen y el texto se entrega como
PageText, una por hoja o una sola para una captura.
"""

import platform
from pathlib import Path

from transfer_parser.domain.exceptions import ExtractionError, FormatoInvalidoError
from transfer_parser.domain.models.page_text import PageText
from transfer_parser.domain.ports.text_extractor import TextExtractor
from transfer_parser.domain.shared.text_cleaner import clean_extracted_text

try:
    import pytesseract
except ImportError:
    pytesseract = None  # type: ignore[assignment]

try:
    from pdf2image import convert_from_path
except ImportError:
    convert_from_path = None  # type: ignore[assignment]

try:
    from PIL import Image
except ImportError:
    Image = None  # type: ignore[assignment]

# El instalador de Tesseract para Windows no lo agrega al PATH.
_RUTAS_TESSERACT_WINDOWS = (
    Path.home() / "AppData/Local/Programs/Tesseract-OCR/tesseract.exe",
    Path(r"C:\Program Files\Tesseract-OCR\tesseract.exe"),
    Path(r"C:\Program Files (x86)\Tesseract-OCR\tesseract.exe"),
)

if pytesseract is not None and platform.system() == "Windows":
    for _ruta in _RUTAS_TESSERACT_WINDOWS:
        if _ruta.exists():
            pytesseract.pytesseract.tesseract_cmd = str(_ruta)
            break


class OcrExtractor(TextExtractor):
    """Reconoce el texto de capturas de pantalla y PDFs escaneados."""

    _EXTENSIONES_IMAGEN: tuple[str, ...] = (".png", ".jpg", ".jpeg")
    _IDIOMA_RESPALDO = "eng"

    def __init__(self, dpi: int = 300, lang: str = "spa+eng") -> None:
        """
        Args:
            dpi: Resolución al rasterizar un PDF. Con menos de 200 el OCR
                 empieza a confundir '1' con 'l' en los RUTs.
            lang: Idiomas de Tesseract unidos con '+'. Si falta alguno se
                  usa 'eng'.
        """
        self._dpi = dpi
        self._lang = lang

    @property
    def name(self) -> str:
        return "ocr-tesseract"

    def can_handle(self, file_path: Path) -> bool:
        extension = file_path.suffix.lower()
        return extension == ".pdf" or extension in self._EXTENSIONES_IMAGEN

    def extract(self, file_path: Path) -> list[PageText]:
        """Una PageText por hoja del PDF, o una sola para una imagen.

        Raises:
            ExtractionError: Falta alguna librería o el binario de
                            Tesseract, o falla la conversión o el OCR.
            FormatoInvalidoError: El archivo no existe o su extensión no
                                  es PDF ni imagen.
        """
        if pytesseract is None:
            raise ExtractionError(
                str(file_path), "falta la librería pytesseract (pip install pytesseract)"
            )
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "PDF o imagen", "El archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path), "PDF o imagen", f"extensión '{file_path.suffix}'"
            )

        idioma = self._resolve_lang()
        paginas: list[PageText] = []
        for numero, imagen in enumerate(self._load_images(file_path), start=1):
            try:
                texto = pytesseract.image_to_string(imagen, lang=idioma)
            except pytesseract.TesseractError as e:
                raise ExtractionError(str(file_path), f"OCR falló en la hoja {numero}: {e}")
            paginas.append(PageText(page_num=numero, text=clean_extracted_text(texto)))
        return paginas

    def _load_images(self, file_path: Path) -> list:
        """Rasteriza el PDF o abre la imagen. Devuelve imágenes PIL."""
        if file_path.suffix.lower() != ".pdf":
            return [self._abrir_imagen(file_path)]

        if convert_from_path is None:
            raise ExtractionError(
                str(file_path), "falta la librería pdf2image (pip install pdf2image)"
            )
        try:
            imagenes = convert_from_path(str(file_path), dpi=self._dpi)
        except Exception as e:
            # pdf2image envuelve los errores de poppler en varios tipos.
            raise ExtractionError(str(file_path), f"no se pudo rasterizar el PDF: {e}")
        if not imagenes:
            raise ExtractionError(str(file_path), "el PDF no produjo imágenes")
        return imagenes

    @staticmethod
    def _abrir_imagen(file_path: Path):
        if Image is None:
            raise ExtractionError(str(file_path), "falta la librería Pillow (pip install Pillow)")
        try:
            with Image.open(file_path) as imagen:
                imagen.load()
                return imagen.copy()
        except OSError as e:
            raise ExtractionError(str(file_path), f"no se pudo abrir la imagen: {e}")

    def _resolve_lang(self) -> str:
        """Idioma efectivo para Tesseract.

        Sin 'spa' se pierden tildes y eñes, pero RUTs, números de cuenta
        y correos se leen igual, así que 'eng' es un respaldo aceptable.
        """
        try:
            instalados = set(pytesseract.get_languages())
        except pytesseract.TesseractNotFoundError as e:
            raise ExtractionError("tesseract", f"no se encontró el binario de Tesseract: {e}")
        except pytesseract.TesseractError:
            # Versiones antiguas no soportan --list-langs; se prueba tal cual.
            return self._lang

        if all(idioma in instalados for idioma in self._lang.split("+")):
            return self._lang
        if self._IDIOMA_RESPALDO in instalados:
            return self._IDIOMA_RESPALDO

        utilizables = sorted(instalados - {"osd"})
        return "+".join(utilizables) if utilizables else self._lang
