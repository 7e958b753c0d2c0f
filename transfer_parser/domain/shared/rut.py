"""
Utilidades para el RUT chileno (Rol Único Tributario).

Formato canónico: cuerpo con puntos cada 3 dígitos desde la derecha,
guión y dígito verificador (DV) en mayúscula.

    143835294     → 14.383.529-4
    12345678k     → 12.345.678-K
    14 383 529-4  → 14.383.529-4

El DV se calcula con el algoritmo módulo 11: se multiplican los dígitos
del cuerpo, de derecha a izquierda, por la serie 2, 3, 4, 5, 6, 7, 2, 3...
El DV es 11 - (suma % 11), con 11 → '0' y 10 → 'K'.
"""

import re

_SEPARADORES = re.compile(r"[.\-\s]")
# Solo 0-9: str.isdigit() también acepta "²" o "١", que int() no convierte.
_CUERPO = re.compile(r"[0-9]+")


def format_rut(rut: str | None) -> str:
    """Formatea un RUT al formato canónico 'XX.XXX.XXX-D'.

    El último carácter siempre se trata como dígito verificador. No se
    valida el DV: un RUT mal tipeado se formatea igual, para que el
    usuario lo vea y lo corrija.

    Args:
        rut: RUT en cualquier formato (con o sin puntos, guión, espacios).

    Returns:
        RUT formateado. Cadena vacía si la entrada es None o vacía.
        Si tras limpiar quedan menos de 2 caracteres, se devuelve la
        entrada sin modificar (no alcanza para cuerpo + DV).

    Ejemplos:
        >>> format_rut("143835294")
        '14.383.529-4'
        >>> format_rut("14.383.529-4")
        '14.383.529-4'
        >>> format_rut("5")
        '5'
    """
    if not rut:
        return ""

    limpio = _SEPARADORES.sub("", rut).upper()
    if len(limpio) < 2:
        return rut

    cuerpo, dv = limpio[:-1], limpio[-1]

    grupos: list[str] = []
    while len(cuerpo) > 3:
        grupos.insert(0, cuerpo[-3:])
        cuerpo = cuerpo[:-3]
    grupos.insert(0, cuerpo)

    return ".".join(grupos) + "-" + dv


def calcular_dv(cuerpo: str) -> str:
    """Calcula el dígito verificador de un cuerpo de RUT.

    Args:
        cuerpo: Solo dígitos, sin puntos ni DV. Ejemplo: '14383529'.

    Returns:
        '0'-'9' o 'K'.

    Raises:
        ValueError: Si el cuerpo está vacío o no es numérico.

    Ejemplos:
        >>> calcular_dv("14383529")
        '4'
        >>> calcular_dv("11111111")
        '1'
    """
    if not _CUERPO.fullmatch(cuerpo):
        raise ValueError(f"Cuerpo de RUT inválido: '{cuerpo}'")

    suma = 0
    factor = 2
    for digito in reversed(cuerpo):
        suma += int(digito) * factor
        factor = 2 if factor == 7 else factor + 1

    resto = 11 - (suma % 11)
    if resto == 11:
        return "0"
    if resto == 10:
        return "K"
    return str(resto)


def es_rut_valido(rut: str | None) -> bool:
    """Indica si el DV del RUT coincide con el calculado.

    Nunca lanza excepción: cualquier entrada no interpretable es False.

    Ejemplos:
        >>> es_rut_valido("14.383.529-4")
        True
        >>> es_rut_valido("14.383.529-5")
        False
    """
    if not rut:
        return False

    limpio = _SEPARADORES.sub("", rut).upper()
    if len(limpio) < 2:
        return False

    cuerpo, dv = limpio[:-1], limpio[-1]
    if not _CUERPO.fullmatch(cuerpo):
        return False
    return calcular_dv(cuerpo) == dv
