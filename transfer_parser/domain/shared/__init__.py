"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa. Solo operan
sobre tipos nativos de Python.

Uso:
    from transfer_parser.domain.shared.rut import format_rut, es_rut_valido
    from transfer_parser.domain.shared.text_cleaner import normalize_line_endings
"""
