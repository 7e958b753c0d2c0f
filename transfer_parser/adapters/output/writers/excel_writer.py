"""
Adaptador de salida: Escritor de Excel.

Genera un archivo Excel con los datos de varios destinatarios, útil
para armar una nómina de transferencias a partir de muchos mensajes:
- Hoja 1 (Destinatarios): una fila por entrada con los seis campos.
- Hoja 2 (Pendientes): entradas a las que les falta algún campo, para
  completarlas a mano antes de transferir.
"""

from pathlib import Path

import pandas as pd

from transfer_parser.domain.exceptions import OutputError
from transfer_parser.domain.models.resultado_extraccion import ResultadoExtraccion
from transfer_parser.domain.ports.output_writer import OutputWriter
from transfer_parser.domain.shared.rut import format_rut

_COLUMNAS: dict[str, str] = {
    "rut": "RUT",
    "nombre": "Nombre",
    "banco": "Banco",
    "tipo_cuenta": "Tipo de Cuenta",
    "numero_cuenta": "Número de Cuenta",
    "email": "Email",
}


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write(self, resultados: list[ResultadoExtraccion], output_path: Path) -> Path:
        """Escribe todos los resultados a un Excel.

        Args:
            resultados: Resultados de extracción, en el orden a escribir.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.

        Raises:
            OutputError: Si no hay resultados o falla la escritura.
        """
        if not resultados:
            raise OutputError(str(output_path), "No hay resultados para exportar")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def _escribir_excel(self, resultados: list[ResultadoExtraccion], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        filas_destinatarios = []
        filas_pendientes = []
        for resultado in resultados:
            datos = resultado.datos
            fila = {
                titulo: getattr(datos, campo) or ""
                for campo, titulo in _COLUMNAS.items()
            }
            fila["RUT"] = format_rut(datos.rut)
            fila["Archivo"] = resultado.archivo_origen
            filas_destinatarios.append(fila)

            if not resultado.completo:
                filas_pendientes.append(
                    {
                        "Archivo": resultado.archivo_origen,
                        "Campos faltantes": ", ".join(
                            _COLUMNAS[campo] for campo in datos.campos_faltantes
                        ),
                    }
                )

        df_destinatarios = pd.DataFrame(filas_destinatarios, columns=[*_COLUMNAS.values(), "Archivo"])
        df_pendientes = pd.DataFrame(filas_pendientes, columns=["Archivo", "Campos faltantes"])

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_destinatarios.to_excel(writer, index=False, sheet_name="Destinatarios")
            df_pendientes.to_excel(writer, index=False, sheet_name="Pendientes")

            workbook = writer.book
            ws_destinatarios = writer.sheets["Destinatarios"]
            ws_pendientes = writer.sheets["Pendientes"]

            # Formato texto: mantener ceros iniciales en la cuenta
            text_format = workbook.add_format({"num_format": "@"})

            ws_destinatarios.set_column("A:A", 14, text_format)  # RUT
            ws_destinatarios.set_column("B:B", 35)  # Nombre
            ws_destinatarios.set_column("C:C", 24)  # Banco
            ws_destinatarios.set_column("D:D", 20)  # Tipo de Cuenta
            ws_destinatarios.set_column("E:E", 20, text_format)  # Número de Cuenta
            ws_destinatarios.set_column("F:F", 32)  # Email
            ws_destinatarios.set_column("G:G", 30)  # Archivo

            ws_pendientes.set_column("A:A", 30)  # Archivo
            ws_pendientes.set_column("B:B", 60)  # Campos faltantes
