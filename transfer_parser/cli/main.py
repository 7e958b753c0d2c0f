"""
Punto de entrada CLI: transfer-parser.

Uso:
    # Pegar el texto por stdin (ej: desde el portapapeles)
    pbpaste | transfer-parser
    xclip -o -selection clipboard | transfer-parser

    # Procesar archivos (.txt, .pdf, capturas .png/.jpg con --ocr)
    transfer-parser datos_juan.txt certificado.pdf

    # Procesar una carpeta y generar una nómina en Excel
    transfer-parser /ruta/mensajes --excel nomina.xlsx

    # Salida JSON en vez del formato compacto
    transfer-parser --json < mensaje.txt

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (BankRegistry, extractores, ConsoleLogger).
- Las inyecta en el FieldExtractor y el TransferProcessor.
- Imprime los resultados.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import json
import sys
from pathlib import Path

from transfer_parser.adapters.input.text_extractors.ocr_extractor import OcrExtractor
from transfer_parser.adapters.input.text_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
)
from transfer_parser.adapters.input.text_extractors.plain_text_extractor import (
    PlainTextExtractor,
)
from transfer_parser.adapters.output.loggers.console_logger import ConsoleLogger
from transfer_parser.adapters.output.writers.excel_writer import ExcelWriter
from transfer_parser.domain.exceptions import ParserBaseError
from transfer_parser.domain.models.resultado_extraccion import ResultadoExtraccion
from transfer_parser.domain.services.canonical_formatter import build_output
from transfer_parser.domain.services.field_extractor import FieldExtractor
from transfer_parser.domain.services.transfer_processor import TransferProcessor
from transfer_parser.infrastructure.bank_registry import create_default_registry


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI.

    Returns:
        0 si se procesó al menos una entrada, 1 si no.
    """
    args = _parse_args(argv)

    # --- Ensamblar componentes ---
    registry = create_default_registry()

    if args.bancos:
        for banco in registry:
            print(f"{banco.codigo}  {banco.nombre}")
        return 0

    logger = ConsoleLogger(stream=sys.stderr, verbose=args.verbose)

    text_extractors = [
        PlainTextExtractor(),
        PdfplumberExtractor(),
    ]
    if args.ocr:
        # Después de pdfplumber: solo se usa si el PDF no tiene texto
        text_extractors.append(OcrExtractor(dpi=args.dpi, lang=args.ocr_lang))

    processor = TransferProcessor(
        text_extractors=text_extractors,
        field_extractor=FieldExtractor(registry),
        logger=logger,
    )

    # --- Procesar ---
    resultados: list[ResultadoExtraccion] = []
    entradas = args.entradas or ["-"]

    for entrada in entradas:
        if entrada == "-":
            resultados.append(processor.process_text(_read_stdin()))
            continue

        path = Path(entrada)
        if path.is_dir():
            resultados.extend(processor.process_directory(path))
        elif path.is_file():
            resultado = processor.process_file(path)
            if resultado is not None:
                resultados.append(resultado)
        else:
            logger.log_error(entrada, FileNotFoundError(f"La ruta no existe: {entrada}"))

    if not resultados:
        print("❌ No se procesó ninguna entrada.", file=sys.stderr)
        return 1

    # --- Mostrar resultados ---
    if args.json:
        print(json.dumps(_as_json(resultados), ensure_ascii=False, indent=2))
    else:
        print("\n\n".join(build_output(r.datos) for r in resultados))

    if args.excel:
        try:
            excel_path = ExcelWriter().write(resultados, Path(args.excel))
        except ParserBaseError as e:
            logger.log_error(args.excel, e)
            return 1
        print(f"\n📁 Excel generado: {excel_path}", file=sys.stderr)

    if args.verbose:
        logger.print_summary()
    return 0


def _read_stdin() -> str:
    """Lee todo stdin. Una entrada ilegible se trata como texto vacío."""
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError):
        return ""


def _as_json(resultados: list[ResultadoExtraccion]) -> dict | list[dict]:
    """Un solo resultado → su diccionario; varios → lista con el origen."""
    if len(resultados) == 1:
        return resultados[0].datos.to_dict()
    return [
        {"archivo": r.archivo_origen, "datos": r.datos.to_dict()}
        for r in resultados
    ]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="transfer-parser",
        description="Extrae los datos de una transferencia bancaria desde texto libre "
        "y los entrega en formato compacto",
        epilog="Ejemplo: pbpaste | transfer-parser",
    )

    parser.add_argument(
        "entradas",
        nargs="*",
        help="Archivos (.txt, .pdf, .png, .jpg) o directorios. "
        "Sin argumentos o con '-', se lee el texto desde stdin.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprimir los campos como JSON en vez del formato compacto.",
    )

    parser.add_argument(
        "--excel",
        metavar="RUTA",
        help="Generar además un Excel con todos los destinatarios procesados.",
    )

    parser.add_argument(
        "--ocr",
        action="store_true",
        help="Usar OCR (Tesseract) para PDFs escaneados y capturas de pantalla.",
    )

    parser.add_argument(
        "--ocr-lang",
        dest="ocr_lang",
        default="spa+eng",
        help="Idiomas de Tesseract (por defecto: spa+eng).",
    )

    parser.add_argument(
        "--dpi",
        type=int,
        default=300,
        help="Resolución para convertir PDFs a imagen con --ocr (por defecto: 300).",
    )

    parser.add_argument(
        "--bancos",
        action="store_true",
        help="Listar los bancos reconocidos y salir.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Mostrar la bitácora completa y el resumen en stderr.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
