"""
Servicio de dominio: Formateador canónico.

Genera el formato compacto de transferencia, una línea por campo
presente y en este orden fijo:

    12.345.678-9
    Nombre Apellido
    Banco
    Tipo de Cuenta
    NumeroCuenta
    email@example.com

Los campos ausentes se omiten (no quedan líneas en blanco). La salida es
también una entrada válida para FieldExtractor.extract().
"""

from transfer_parser.domain.models.datos_transferencia import (
    CAMPOS_CANONICOS,
    DatosTransferencia,
)
from transfer_parser.domain.shared.rut import format_rut


def build_output(datos: DatosTransferencia) -> str:
    """Construye el texto canónico a partir de un registro.

    El RUT siempre pasa por format_rut, así que da igual si el registro
    trae '143835294' o '14.383.529-4'.

    Returns:
        Líneas unidas con '\\n'. Cadena vacía para un registro vacío.

    Ejemplos:
        >>> build_output(DatosTransferencia(numero_cuenta="123"))
        '123'
    """
    lineas: list[str] = []
    for campo in CAMPOS_CANONICOS:
        valor = getattr(datos, campo)
        if not valor:
            continue
        lineas.append(format_rut(valor) if campo == "rut" else valor)
    return "\n".join(lineas)
