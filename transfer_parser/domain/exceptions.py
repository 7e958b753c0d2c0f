"""
Excepciones de dominio de transfer-parser.

Solo las lanza la capa de entrada/salida. El FieldExtractor, el
BankRegistry y build_output nunca fallan por un texto raro: lo que no
reconocen queda ausente en DatosTransferencia.

    ParserBaseError
    ├── FormatoInvalidoError   → archivo inexistente o de un tipo no soportado
    ├── ExtractionError        → no se pudo obtener texto del archivo
    └── OutputError            → no se pudo escribir el archivo de salida
"""


class ParserBaseError(Exception):
    """Raíz de las excepciones del proyecto.

    El CLI captura esta clase; el TransferProcessor captura las
    subclases para pasar al siguiente extractor.
    """


class FormatoInvalidoError(ParserBaseError):
    """La entrada no existe o no es del tipo que el adaptador espera
    (ej: un .docx entregado al extractor de PDFs)."""

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        self.detalle = detalle
        mensaje = f"'{archivo}' no es {formato_esperado} válido"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class ExtractionError(ParserBaseError):
    """No se pudo leer el texto de un archivo que sí es del tipo correcto.

    Casos típicos: PDF con contraseña o dañado, imagen ilegible, falta
    pdfplumber/pytesseract o el binario de Tesseract.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Sin texto de '{archivo}': {causa}")


class OutputError(ParserBaseError):
    """Falló la escritura del archivo de salida (lista vacía, permisos,
    error del motor de Excel)."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"No se pudo escribir '{ruta_salida}': {causa}")
