"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento de
las entradas. El dominio no hace print(): solo conoce los EVENTOS de
negocio:
- "Se recibió una entrada"
- "No se encontró el número de cuenta"
- "El dígito verificador del RUT no coincide"

La implementación decide el CÓMO:
- En desarrollo/terminal: imprimir a consola (ConsoleLogger).
- En tests: acumular en memoria y hacer asserts.
"""

from abc import ABC, abstractmethod


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Entrada ---

    @abstractmethod
    def log_input_received(self, origen: str, tipo: str) -> None:
        """Registra que se recibió una entrada para procesar.

        Args:
            origen: Nombre del archivo o '<stdin>'.
            tipo: Tipo detectado: extensión del archivo o 'texto'.
        """
        ...

    @abstractmethod
    def log_input_skipped(self, origen: str, reason: str) -> None:
        """Registra que una entrada fue descartada.

        Args:
            origen: Nombre del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .docx no soportada"
        """
        ...

    @abstractmethod
    def log_extraction_start(self, origen: str, extractor_name: str) -> None:
        """Registra el inicio de extracción de texto de un archivo."""
        ...

    # --- Campos ---

    @abstractmethod
    def log_fields_extracted(self, origen: str, num_campos: int) -> None:
        """Registra el fin de la extracción de campos.

        Args:
            origen: Entrada procesada.
            num_campos: Cantidad de campos encontrados (0-6).
        """
        ...

    @abstractmethod
    def log_field_missing(self, origen: str, campo: str) -> None:
        """Registra que un campo no se pudo determinar."""
        ...

    @abstractmethod
    def log_validation_mismatch(
        self,
        origen: str,
        field: str,
        expected: str,
        actual: str,
    ) -> None:
        """Registra una discrepancia de validación.

        Se usa cuando el dígito verificador del RUT no coincide con el
        calculado.

        Args:
            origen: Entrada donde se encontró la discrepancia.
            field: Campo con discrepancia (ej: 'rut').
            expected: Valor esperado (calculado).
            actual: Valor encontrado en el texto.
        """
        ...

    @abstractmethod
    def log_error(self, origen: str, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'entradas_recibidas': int,
                'entradas_procesadas': int,
                'entradas_descartadas': int,
                'entradas_con_error': int,
                'campos_faltantes': int,
                'advertencias': int,
                'errores': List[dict],  # [{origen, error}]
            }
        """
        ...
