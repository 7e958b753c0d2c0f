"""
Modelo de dominio: Resultado de procesar una entrada.

Lo produce el TransferProcessor y lo consumen el CLI y el OutputWriter.
Guarda el archivo de origen para trazabilidad en la bitácora y en la
hoja de Excel consolidada.
"""

from dataclasses import dataclass

from transfer_parser.domain.models.datos_transferencia import DatosTransferencia


@dataclass(frozen=True)
class ResultadoExtraccion:
    """Datos extraídos de una entrada (archivo o stdin)."""

    datos: DatosTransferencia
    """Campos encontrados."""

    archivo_origen: str
    """Nombre del archivo procesado, o '<stdin>'."""

    @property
    def completo(self) -> bool:
        """True si se encontraron los seis campos."""
        return not self.datos.campos_faltantes
