"""
Tests para las utilidades de RUT.

Verifican el formato canónico (puntos cada 3 dígitos, guión, DV en
mayúscula) y el cálculo del dígito verificador módulo 11.
"""

import pytest

from transfer_parser.domain.shared.rut import calcular_dv, es_rut_valido, format_rut


class TestFormatRut:
    """Pruebas para format_rut."""

    @pytest.mark.parametrize(
        "entrada, esperado",
        [
            ("143835294", "14.383.529-4"),
            ("14383529-4", "14.383.529-4"),
            ("14.383.529-4", "14.383.529-4"),
            ("14 383 529-4", "14.383.529-4"),
            ("12345678k", "12.345.678-K"),
            ("9876543-2", "9.876.543-2"),
            ("1-9", "1-9"),
            ("19", "1-9"),
            ("1234-5", "1.234-5"),
        ],
    )
    def test_formatos_de_entrada(self, entrada, esperado):
        assert format_rut(entrada) == esperado

    @pytest.mark.parametrize("entrada", [None, ""])
    def test_vacio_devuelve_cadena_vacia(self, entrada):
        assert format_rut(entrada) == ""

    @pytest.mark.parametrize("entrada", ["5", "-", " 5 "])
    def test_menos_de_dos_caracteres_devuelve_la_entrada(self, entrada):
        assert format_rut(entrada) == entrada

    @pytest.mark.parametrize("entrada", ["143835294", "12345678k", "1-9", "1234-5"])
    def test_es_idempotente(self, entrada):
        una_vez = format_rut(entrada)
        assert format_rut(una_vez) == una_vez

    def test_no_valida_el_dv(self):
        """Un RUT mal tipeado se formatea igual, para que se vea y corrija."""
        assert format_rut("143835295") == "14.383.529-5"


class TestCalcularDv:
    """Pruebas para calcular_dv (módulo 11)."""

    @pytest.mark.parametrize(
        "cuerpo, dv",
        [
            ("14383529", "4"),
            ("11111111", "1"),
            ("17654321", "3"),
            ("1", "9"),
            ("6", "K"),
            ("0", "0"),
        ],
    )
    def test_digito_verificador(self, cuerpo, dv):
        assert calcular_dv(cuerpo) == dv

    @pytest.mark.parametrize("cuerpo", ["", "12.345", "12a45", "1²3", "١٢٣", "１２３"])
    def test_cuerpo_invalido_lanza_error(self, cuerpo):
        with pytest.raises(ValueError, match="inválido"):
            calcular_dv(cuerpo)


class TestEsRutValido:
    """Pruebas para es_rut_valido."""

    @pytest.mark.parametrize("rut", ["14.383.529-4", "143835294", "11111111-1", "6-k", "0-0"])
    def test_validos(self, rut):
        assert es_rut_valido(rut)

    @pytest.mark.parametrize("rut", ["14.383.529-5", "17.654.321-0", None, "", "5", "ab-1"])
    def test_invalidos(self, rut):
        assert not es_rut_valido(rut)

    @pytest.mark.parametrize("rut", ["1²3-4", "١٢٣٤٥-6", "１２３４５-6"])
    def test_digitos_no_ascii_no_lanzan(self, rut):
        """Superíndices y dígitos de otros alfabetos no son un RUT."""
        assert es_rut_valido(rut) is False
