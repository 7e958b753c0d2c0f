"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos con un
formato consistente y un resumen final.

Escribe a un stream configurable. El CLI le pasa sys.stderr para que
stdout quede limpio para el texto canónico o el JSON (y se pueda
redirigir o encadenar con otros comandos).
"""

import sys
from typing import TextIO

from transfer_parser.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, stream: TextIO | None = None, verbose: bool = True) -> None:
        """
        Args:
            stream: Destino de los mensajes. Por defecto sys.stdout.
            verbose: Si False, solo se imprimen advertencias y errores
                     (los contadores se llevan igual).
        """
        self._stream = stream if stream is not None else sys.stdout
        self._verbose = verbose
        self._entradas_recibidas: int = 0
        self._entradas_procesadas: int = 0
        self._entradas_descartadas: int = 0
        self._campos_faltantes: int = 0
        self._advertencias: int = 0
        self._errores: list[dict] = []

    def _print(self, mensaje: str, always: bool = False) -> None:
        if always or self._verbose:
            print(mensaje, file=self._stream)

    # --- Entrada ---

    def log_input_received(self, origen: str, tipo: str) -> None:
        self._entradas_recibidas += 1
        self._print(f"  📄 Recibido: {origen} ({tipo})")

    def log_input_skipped(self, origen: str, reason: str) -> None:
        self._entradas_descartadas += 1
        self._print(f"  ⏭️  Descartado: {origen} — {reason}")

    def log_extraction_start(self, origen: str, extractor_name: str) -> None:
        self._print(f"  🔍 Extrayendo texto ({extractor_name}): {origen}")

    # --- Campos ---

    def log_fields_extracted(self, origen: str, num_campos: int) -> None:
        self._entradas_procesadas += 1
        self._print(f"  ✅ Completado: {origen} — {num_campos}/6 campos")

    def log_field_missing(self, origen: str, campo: str) -> None:
        self._campos_faltantes += 1
        self._print(f"  ❔ Falta {campo}: {origen}")

    def log_validation_mismatch(
        self, origen: str, field: str, expected: str, actual: str
    ) -> None:
        self._advertencias += 1
        self._print(
            f"  ⚠️  Discrepancia en {origen}: "
            f"{field} — esperado: {expected}, encontrado: {actual}",
            always=True,
        )

    def log_error(self, origen: str, error: Exception) -> None:
        self._errores.append({"origen": origen, "error": str(error)})
        self._print(f"  ❌ Error: {origen} — {error}", always=True)

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "entradas_recibidas": self._entradas_recibidas,
            "entradas_procesadas": self._entradas_procesadas,
            "entradas_descartadas": self._entradas_descartadas,
            "entradas_con_error": len(self._errores),
            "campos_faltantes": self._campos_faltantes,
            "advertencias": self._advertencias,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        self._print("\n" + "=" * 60)
        self._print("RESUMEN DE PROCESAMIENTO")
        self._print("=" * 60)
        self._print(f"  Entradas recibidas:   {self._entradas_recibidas}")
        self._print(f"  Entradas procesadas:  {self._entradas_procesadas}")
        self._print(f"  Entradas descartadas: {self._entradas_descartadas}")
        self._print(f"  Entradas con error:   {len(self._errores)}")
        self._print(f"  Campos faltantes:     {self._campos_faltantes}")
        self._print(f"  Advertencias:         {self._advertencias}")

        if self._errores:
            self._print("\n  ERRORES:")
            for err in self._errores:
                self._print(f"    - {err['origen']}: {err['error']}")

        self._print("=" * 60)
