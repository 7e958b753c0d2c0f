"""
Servicio de dominio: Procesador de entradas.

Orquesta el flujo completo para una entrada:
1. Recibe texto (stdin) o una ruta a un archivo.
2. Si es archivo, selecciona los TextExtractor adecuados (can_handle)
   y extrae el texto, con fallback al siguiente extractor si el primero
   no obtiene nada (PDF escaneado → OCR).
3. Extrae los campos con el FieldExtractor.
4. Registra en la bitácora los campos faltantes y un RUT con dígito
   verificador incorrecto.

¿Por qué no poner esta lógica en el CLI?
Porque "dado un archivo, producir los datos de transferencia" es una
regla del dominio. El CLI solo decide QUÉ entradas procesar y CÓMO
mostrar los resultados.
"""

from collections.abc import Sequence
from pathlib import Path

from transfer_parser.domain.exceptions import ExtractionError, FormatoInvalidoError
from transfer_parser.domain.models.page_text import PageText
from transfer_parser.domain.models.resultado_extraccion import ResultadoExtraccion
from transfer_parser.domain.ports.process_logger import ProcessLogger
from transfer_parser.domain.ports.text_extractor import TextExtractor
from transfer_parser.domain.services.field_extractor import FieldExtractor
from transfer_parser.domain.shared.rut import calcular_dv, es_rut_valido, format_rut
from transfer_parser.domain.shared.text_cleaner import clean_extracted_text


class TransferProcessor:
    """Procesa una entrada y produce un ResultadoExtraccion.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué TextExtractor concretos se están usando; solo conoce
    las interfaces (puertos).
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        field_extractor: FieldExtractor,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            text_extractors: Extractores disponibles, en orden de prioridad.
            field_extractor: Extractor de campos (con su catálogo de bancos).
            logger: Logger para la bitácora de procesamiento.
        """
        self._extractors = text_extractors
        self._field_extractor = field_extractor
        self._logger = logger

    def process_text(self, texto: str, origen: str = "<stdin>") -> ResultadoExtraccion:
        """Extrae los campos de un texto ya disponible (stdin, portapapeles).

        Nunca devuelve None: un texto sin datos reconocibles produce un
        registro vacío.
        """
        self._logger.log_input_received(origen, "texto")
        return self._extraer_campos(clean_extracted_text(texto or ""), origen)

    def process_file(self, file_path: Path) -> ResultadoExtraccion | None:
        """Procesa un archivo y devuelve el resultado.

        Returns:
            ResultadoExtraccion si se pudo leer el archivo.
            None si fue descartado o ningún extractor pudo leerlo.
        """
        origen = file_path.name
        self._logger.log_input_received(origen, file_path.suffix.lower() or "sin extensión")

        pages = self._extract_with_fallback(file_path)
        if pages is None:
            return None

        texto = "\n".join(page.text for page in pages)
        return self._extraer_campos(texto, origen)

    def process_directory(self, dir_path: Path) -> list[ResultadoExtraccion]:
        """Procesa todos los archivos soportados de un directorio (recursivo).

        Returns:
            Lista de ResultadoExtraccion (solo los exitosos).

        Raises:
            FormatoInvalidoError: Si la ruta no es un directorio.
        """
        if not dir_path.is_dir():
            raise FormatoInvalidoError(str(dir_path), "directorio", "No es un directorio")

        archivos = sorted(
            path
            for path in dir_path.glob("**/*")
            if path.is_file() and any(e.can_handle(path) for e in self._extractors)
        )

        resultados: list[ResultadoExtraccion] = []
        for archivo in archivos:
            resultado = self.process_file(archivo)
            if resultado is not None:
                resultados.append(resultado)
        return resultados

    def _extraer_campos(self, texto: str, origen: str) -> ResultadoExtraccion:
        datos = self._field_extractor.extract(texto)

        self._logger.log_fields_extracted(origen, len(datos.to_dict()))
        for campo in datos.campos_faltantes:
            self._logger.log_field_missing(origen, campo)

        # El extractor no rechaza RUTs mal tipeados; solo se advierte.
        if datos.rut and not es_rut_valido(datos.rut):
            self._logger.log_validation_mismatch(
                origen,
                "rut",
                expected=self._dv_esperado(datos.rut),
                actual=format_rut(datos.rut),
            )

        return ResultadoExtraccion(datos=datos, archivo_origen=origen)

    @staticmethod
    def _dv_esperado(rut: str) -> str:
        """Dígito verificador que debería tener el RUT, o '?' si el
        cuerpo no es numérico."""
        cuerpo = "".join(c for c in rut[:-1] if c.isdigit())
        try:
            return f"DV {calcular_dv(cuerpo)}"
        except ValueError:
            return "?"

    def _extract_with_fallback(self, file_path: Path) -> list[PageText] | None:
        """Intenta extraer texto probando extractores en orden.

        Si un extractor falla (ExtractionError) o devuelve solo páginas
        vacías, se prueba el siguiente que pueda manejar el archivo.
        Un PDF escaneado no tiene texto para pdfplumber, pero sí para OCR.

        Returns:
            Lista de PageText del primer extractor que obtuvo texto.
            None si ningún extractor pudo extraer texto.
        """
        origen = file_path.name
        compatibles = [e for e in self._extractors if e.can_handle(file_path)]

        if not compatibles:
            self._logger.log_input_skipped(
                origen,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        for extractor in compatibles:
            self._logger.log_extraction_start(origen, extractor.name)

            try:
                pages = extractor.extract(file_path)
            except (ExtractionError, FormatoInvalidoError) as e:
                self._logger.log_error(origen, e)
                continue

            if pages and not all(page.is_empty for page in pages):
                return pages

            self._logger.log_input_skipped(
                origen,
                f"Sin texto con {extractor.name}, intentando siguiente...",
            )

        self._logger.log_input_skipped(origen, "Archivo sin texto extraíble")
        return None
