"""Tests para el ConsoleLogger."""

import io

import pytest

from transfer_parser.adapters.output.loggers.console_logger import ConsoleLogger


@pytest.fixture
def stream():
    return io.StringIO()


class TestConsoleLogger:
    def test_contadores_del_resumen(self, stream):
        logger = ConsoleLogger(stream=stream)

        logger.log_input_received("a.txt", ".txt")
        logger.log_extraction_start("a.txt", "texto-plano")
        logger.log_fields_extracted("a.txt", 5)
        logger.log_field_missing("a.txt", "email")
        logger.log_input_received("b.pdf", ".pdf")
        logger.log_input_skipped("b.pdf", "Archivo sin texto extraíble")
        logger.log_validation_mismatch("a.txt", "rut", "DV 4", "14.383.529-5")
        logger.log_error("b.pdf", ValueError("corrupto"))

        resumen = logger.get_summary()
        assert resumen["entradas_recibidas"] == 2
        assert resumen["entradas_procesadas"] == 1
        assert resumen["entradas_descartadas"] == 1
        assert resumen["entradas_con_error"] == 1
        assert resumen["campos_faltantes"] == 1
        assert resumen["advertencias"] == 1
        assert resumen["errores"] == [{"origen": "b.pdf", "error": "corrupto"}]

    def test_verbose_imprime_todo(self, stream):
        logger = ConsoleLogger(stream=stream, verbose=True)

        logger.log_input_received("a.txt", ".txt")
        logger.log_fields_extracted("a.txt", 6)

        salida = stream.getvalue()
        assert "Recibido: a.txt (.txt)" in salida
        assert "6/6 campos" in salida

    def test_silencioso_solo_advertencias_y_errores(self, stream):
        logger = ConsoleLogger(stream=stream, verbose=False)

        logger.log_input_received("a.txt", ".txt")
        logger.log_field_missing("a.txt", "email")
        logger.log_validation_mismatch("a.txt", "rut", "DV 4", "14.383.529-5")
        logger.log_error("a.txt", ValueError("ilegible"))

        salida = stream.getvalue()
        assert "Recibido" not in salida
        assert "Falta email" not in salida
        assert "esperado: DV 4, encontrado: 14.383.529-5" in salida
        assert "ilegible" in salida

    def test_print_summary_lista_errores(self, stream):
        logger = ConsoleLogger(stream=stream)
        logger.log_error("b.pdf", ValueError("corrupto"))

        logger.print_summary()

        salida = stream.getvalue()
        assert "RESUMEN DE PROCESAMIENTO" in salida
        assert "- b.pdf: corrupto" in salida
