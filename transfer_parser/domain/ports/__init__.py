"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from transfer_parser.domain.ports import BankCatalog, TextExtractor
"""

from transfer_parser.domain.ports.bank_catalog import BankCatalog
from transfer_parser.domain.ports.output_writer import OutputWriter
from transfer_parser.domain.ports.process_logger import ProcessLogger
from transfer_parser.domain.ports.text_extractor import TextExtractor

__all__ = [
    "BankCatalog",
    "OutputWriter",
    "ProcessLogger",
    "TextExtractor",
]
