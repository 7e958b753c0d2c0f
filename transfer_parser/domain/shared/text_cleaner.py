"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto que llega del
portapapeles, de un archivo o de un PDF antes de que el FieldExtractor
lo procese.

Estas funciones NO tienen lógica de negocio (no saben de bancos ni RUTs).
Solo operan sobre strings puros.
"""

import re


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs/saltos por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  Cuenta   Vista  ")
        'Cuenta Vista'
        >>> clean_whitespace("Cuenta\\nCorriente")
        'Cuenta Corriente'
    """
    return re.sub(r"\s+", " ", text).strip()


def remove_non_printable(text: str) -> str:
    """Elimina caracteres no imprimibles (control chars) excepto \\n, \\r, \\t.

    El texto de OCR y algunos mensajes copiados desde apps de chat traen
    caracteres de control invisibles (ej: marcas de dirección) que
    rompen los regex del extractor.

    Ejemplos:
        >>> remove_non_printable("Banco\\x00Estado")
        'Banco Estado'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    El texto copiado puede venir con \\r\\n (Windows), \\r (Mac antiguo)
    o \\n (Unix). Normalizar asegura que split('\\n') funcione igual
    en todos los casos.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_extracted_text(text: str) -> str:
    """Aplica las limpiezas comunes en secuencia.

    Es la función que los text extractors llaman después de leer el
    texto crudo del archivo, ANTES de pasarlo al extractor de campos.

    Secuencia:
    1. Eliminar caracteres no imprimibles
    2. Normalizar saltos de línea
    (NO aplica clean_whitespace porque eso eliminaría los \\n que el
    extractor necesita para procesar línea por línea)
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    return text


def non_empty_lines(text: str) -> list[str]:
    """Divide en líneas, hace strip de cada una y descarta las vacías.

    Ejemplos:
        >>> non_empty_lines("  Juan \\n\\n  RUT: 1-9  \\n")
        ['Juan', 'RUT: 1-9']
    """
    return [linea.strip() for linea in text.split("\n") if linea.strip()]
