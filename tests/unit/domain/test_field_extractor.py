"""
Tests para el FieldExtractor.

Cubren los dos formatos que la gente comparte al pedir una transferencia:
- Con etiquetas ("Nombre:", "RUT:", "Banco:"), en varias líneas o en una.
- Compacto sin etiquetas (una línea por dato), que es además el formato
  que genera build_output.

Son la "documentación ejecutable" del extractor: el orden de las reglas
y los desempates (primera línea que coincide) están fijados aquí.
"""

import pytest

from transfer_parser.domain.models.datos_transferencia import DatosTransferencia
from transfer_parser.domain.services.field_extractor import FieldExtractor
from transfer_parser.infrastructure.bank_registry import (
    BankRegistry,
    create_default_registry,
)


@pytest.fixture
def extractor():
    return FieldExtractor(create_default_registry())


class TestEntradaVacia:
    """Texto vacío o sin contenido → registro vacío, nunca una excepción."""

    @pytest.mark.parametrize("texto", [None, "", "   \n\n  ", "\r\n\r\n"])
    def test_devuelve_registro_vacio(self, extractor, texto):
        datos = extractor.extract(texto)
        assert datos == DatosTransferencia()
        assert datos.to_dict() == {}


class TestFormatoConEtiquetas:
    """Pasada 1: valores después de una etiqueta con ':'."""

    def test_formato_multilinea_estandar(self, extractor):
        texto = (
            "Nombre: Juan Pérez\n"
            "Rut: 14.383.529-4\n"
            "Banco: Banco Estado\n"
            "Tipo de cuenta: Cuenta Vista\n"
            "Numero de cuenta: 123456789\n"
            "Email: juan@example.com"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "Juan Pérez"
        assert datos.rut == "14.383.529-4"
        assert datos.banco == "Banco Estado"
        assert datos.tipo_cuenta == "Cuenta Vista"
        assert datos.numero_cuenta == "123456789"
        assert datos.email == "juan@example.com"

    def test_ejemplo_completo_con_banco_por_alias(self, extractor):
        texto = (
            "Nombre: Ana\nRut: 11111111-1\nBanco: BCI\n"
            "Tipo de cuenta: Vista\nNumero de cuenta: 100\nEmail: a@b.cl"
        )
        assert extractor.extract(texto).to_dict() == {
            "rut": "11111111-1",
            "nombre": "Ana",
            "banco": "Banco BCI - Mach",
            "tipo_cuenta": "Vista",
            "numero_cuenta": "100",
            "email": "a@b.cl",
        }

    def test_etiquetas_en_mayusculas(self, extractor):
        texto = (
            "NOMBRE: María López\n"
            "RUT: 12345678-9\n"
            "BANCO: Banco de Chile\n"
            "TIPO DE CUENTA: Cuenta Corriente\n"
            "NUMERO DE CUENTA: 987654321\n"
            "EMAIL: maria@test.cl"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "María López"
        assert datos.banco == "Banco de Chile"
        assert datos.numero_cuenta == "987654321"
        assert datos.email == "maria@test.cl"

    def test_todo_en_una_sola_linea(self, extractor):
        """Cada valor termina donde empieza la siguiente etiqueta."""
        texto = (
            "Nombre: Juan Pérez Rut: 14383529-4 Banco: Banco Estado "
            "Tipo de cuenta: Vista Numero de cuenta: 123456 Email: juan@mail.com"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "Juan Pérez"
        assert datos.rut == "14383529-4"
        assert datos.banco == "Banco Estado"
        assert datos.tipo_cuenta == "Vista"
        assert datos.numero_cuenta == "123456"
        assert datos.email == "juan@mail.com"

    def test_valor_no_incluye_la_etiqueta_siguiente(self, extractor):
        datos = extractor.extract("Titular: Ana Rut: 1-9")
        assert datos.nombre == "Ana"
        assert datos.rut == "1-9"

    def test_espacios_alrededor_de_los_dos_puntos(self, extractor):
        texto = "Nombre :  Juan Pérez\nRut :  14383529-4\nEmail :  juan@mail.com"
        datos = extractor.extract(texto)

        assert datos.nombre == "Juan Pérez"
        assert datos.rut == "14383529-4"
        assert datos.email == "juan@mail.com"

    def test_saltos_de_linea_windows(self, extractor):
        texto = (
            "Nombre: Juan\r\nRut: 11111111-1\r\nBanco: BCI\r\n"
            "Tipo de cuenta: Vista\r\nNumero de cuenta: 123\r\nEmail: j@m.com"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "Juan"
        assert datos.rut == "11111111-1"
        assert datos.banco == "Banco BCI - Mach"
        assert datos.email == "j@m.com"

    def test_saltos_de_linea_mac_antiguo(self, extractor):
        datos = extractor.extract("Nombre: Juan\rRut: 11111111-1")
        assert datos.nombre == "Juan"
        assert datos.rut == "11111111-1"

    def test_espacios_al_inicio_y_final(self, extractor):
        texto = """
        Nombre: Juan Pérez
        Rut: 14383529-4
        Email: juan@mail.com
        """
        datos = extractor.extract(texto)

        assert datos.nombre == "Juan Pérez"
        assert datos.email == "juan@mail.com"

    def test_etiqueta_sin_valor_queda_ausente(self, extractor):
        datos = extractor.extract("Email:\nRut: 11.111.111-1")
        assert datos.email is None
        assert datos.rut == "11.111.111-1"

    def test_mensaje_de_whatsapp_con_encabezado(self, extractor):
        texto = (
            "Datos para transferencia:\n"
            "Titular: Francisca Muñoz\n"
            "Rut: 16.789.012-3\n"
            "Banco: Banco Santander\n"
            "Tipo de cuenta: Cuenta Corriente\n"
            "N° de cuenta: 0012345678\n"
            "Correo: fran.munoz@gmail.com"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "Francisca Muñoz"
        assert datos.rut == "16.789.012-3"
        assert datos.banco == "Banco Santander"
        assert datos.tipo_cuenta == "Cuenta Corriente"
        assert datos.numero_cuenta == "0012345678"
        assert datos.email == "fran.munoz@gmail.com"

    def test_estilos_de_etiqueta_mezclados(self, extractor):
        texto = (
            "Beneficiario: Claudia Ríos\n"
            "R.U.T.: 15.432.198-7\n"
            "Institución financiera: BCI\n"
            "Tipo de Cuenta: Cuenta RUT\n"
            "Cuenta N°: 154321987\n"
            "Correo electrónico: claudia.rios@outlook.com"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "Claudia Ríos"
        assert datos.rut == "15.432.198-7"
        assert datos.banco == "Banco BCI - Mach"
        assert datos.tipo_cuenta == "Cuenta RUT"
        assert datos.numero_cuenta == "154321987"
        assert datos.email == "claudia.rios@outlook.com"

    def test_datos_parciales(self, extractor):
        datos = extractor.extract("Nombre: Juan\nRut: 11111111-1")
        assert datos.nombre == "Juan"
        assert datos.rut == "11111111-1"
        assert datos.banco is None
        assert datos.email is None


class TestVariantesDeEtiqueta:
    """Cada sinónimo de etiqueta, con y sin tilde, llena el mismo campo."""

    @pytest.mark.parametrize(
        "etiqueta",
        [
            "Nombre",
            "Titular",
            "Nombre titular",
            "Nombre del titular",
            "Beneficiario",
            "Destinatario",
        ],
    )
    def test_nombre(self, extractor, etiqueta):
        datos = extractor.extract(f"{etiqueta}: Pedro Soto\nRut: 11111111-1")
        assert datos.nombre == "Pedro Soto"

    @pytest.mark.parametrize("etiqueta", ["Rut", "RUT", "R.U.T", "R.U.T."])
    def test_rut(self, extractor, etiqueta):
        datos = extractor.extract(f"Nombre: Test\n{etiqueta}: 12345678-K")
        assert datos.rut == "12345678-K"

    @pytest.mark.parametrize(
        "etiqueta",
        [
            "Banco",
            "Banco destino",
            "Banco de destino",
            "Institución",
            "Institucion financiera",
            "Institución financiera",
        ],
    )
    def test_banco(self, extractor, etiqueta):
        datos = extractor.extract(f"Nombre: Test\n{etiqueta}: Banco Falabella")
        assert datos.banco == "Banco Falabella"

    @pytest.mark.parametrize("etiqueta", ["Tipo de cuenta", "Tipo cuenta", "TIPO DE CUENTA"])
    def test_tipo_cuenta(self, extractor, etiqueta):
        datos = extractor.extract(f"Nombre: Test\n{etiqueta}: Cuenta Corriente")
        assert datos.tipo_cuenta == "Cuenta Corriente"

    @pytest.mark.parametrize(
        "etiqueta",
        [
            "N° cuenta",
            "Nº de cuenta",
            "N# cuenta",
            "Cuenta N°",
            "Número de Cuenta",
            "Numero cuenta",
            "Numero de cuenta",
        ],
    )
    def test_numero_cuenta(self, extractor, etiqueta):
        datos = extractor.extract(f"Nombre: Test\n{etiqueta}: 999888")
        assert datos.numero_cuenta == "999888"

    @pytest.mark.parametrize(
        "etiqueta",
        ["Email", "E-mail", "Correo", "Correo electrónico", "Correo electronico"],
    )
    def test_email(self, extractor, etiqueta):
        datos = extractor.extract(f"Nombre: Test\n{etiqueta}: user@domain.cl")
        assert datos.email == "user@domain.cl"


class TestUnSoloCampo:
    """Un texto con una sola etiqueta produce exactamente ese campo.

    En particular, la línea con etiqueta no se toma como nombre.
    """

    @pytest.mark.parametrize(
        "texto, esperado",
        [
            ("Nombre: Ana", {"nombre": "Ana"}),
            ("Rut: 11.111.111-1", {"rut": "11.111.111-1"}),
            ("Banco: BCI", {"banco": "Banco BCI - Mach"}),
            ("Banco: Banco Inventado", {"banco": "Banco Inventado"}),
            ("Tipo de cuenta: Vista", {"tipo_cuenta": "Vista"}),
            ("Numero de cuenta: 100", {"numero_cuenta": "100"}),
            ("Cuenta N°: 100", {"numero_cuenta": "100"}),
            ("Email: a@b.cl", {"email": "a@b.cl"}),
        ],
    )
    def test_solo_ese_campo(self, extractor, texto, esperado):
        assert extractor.extract(texto).to_dict() == esperado


class TestFormatoCompacto:
    """Pasada 2: una línea por dato, sin etiquetas."""

    def test_formato_compacto_con_cuenta_combinada(self, extractor):
        texto = (
            "JORGE ANDRES MIRANDA SOTO\n"
            "RUT: 17.654.321-0\n"
            "Cuenta Corriente Nº 7019876543\n"
            "Banco Ripley\n"
            "jorge.miranda@example.com"
        )
        datos = extractor.extract(texto)

        assert datos.nombre == "JORGE ANDRES MIRANDA SOTO"
        assert datos.rut == "17.654.321-0"
        assert datos.tipo_cuenta == "Cuenta Corriente"
        assert datos.numero_cuenta == "7019876543"
        assert datos.banco == "Banco Ripley"
        assert datos.email == "jorge.miranda@example.com"

    def test_compacto_minimo(self, extractor):
        datos = extractor.extract("Juan\nRUT: 1-9\nCuenta Vista Nº 55\nBanco Estado\nj@x.cl")

        assert datos.nombre == "Juan"
        assert datos.tipo_cuenta == "Cuenta Vista"
        assert datos.numero_cuenta == "55"
        assert datos.banco == "Banco Estado"
        assert datos.email == "j@x.cl"

    @pytest.mark.parametrize(
        "linea, tipo, numero",
        [
            ("Cuenta Vista Nº 123456789", "Cuenta Vista", "123456789"),
            ("Cuenta RUT Nº 111111111", "Cuenta RUT", "111111111"),
            ("Cuenta Ahorro Nº 5556667", "Cuenta Ahorro", "5556667"),
            ("Cuenta Corriente N° 999", "Cuenta Corriente", "999"),
            ("Chequera Electrónica N 4455", "Chequera Electrónica", "4455"),
        ],
    )
    def test_linea_de_cuenta_combinada(self, extractor, linea, tipo, numero):
        datos = extractor.extract(f"Pedro Soto\n{linea}")
        assert datos.tipo_cuenta == tipo
        assert datos.numero_cuenta == numero

    def test_sin_n_no_es_linea_combinada(self, extractor):
        datos = extractor.extract("Pedro Soto\nCuenta Corriente #999")
        assert datos.tipo_cuenta is None
        assert datos.numero_cuenta is None

    def test_cuenta_combinada_colapsa_espacios_del_tipo(self, extractor):
        datos = extractor.extract("Cuenta   Vista Nº 55")
        assert datos.tipo_cuenta == "Cuenta Vista"

    def test_cuenta_combinada_no_pisa_valor_con_etiqueta(self, extractor):
        texto = "Tipo de cuenta: Cuenta RUT\nCuenta Vista Nº 55"
        datos = extractor.extract(texto)
        assert datos.tipo_cuenta == "Cuenta RUT"
        assert datos.numero_cuenta == "55"

    def test_ignora_encabezados_de_seccion(self, extractor):
        texto = (
            "Datos bancarios:\n"
            "Juan Pérez\n"
            "RUT: 12.345.678-9\n"
            "Cuenta Corriente Nº 999\n"
            "Banco BCI\n"
            "juan@mail.com"
        )
        datos = extractor.extract(texto)
        assert datos.nombre == "Juan Pérez"
        assert datos.banco == "Banco BCI - Mach"

    def test_texto_sin_datos_reconocibles_es_nombre(self, extractor):
        """La primera línea que nadie reclama se toma como nombre."""
        datos = extractor.extract("Just some random text with no bank data")
        assert datos.to_dict() == {"nombre": "Just some random text with no bank data"}


class TestFormatoDeLineasSueltas:
    """Seis líneas sueltas: el mismo formato que genera build_output."""

    def test_seis_lineas_con_todos_los_campos(self, extractor):
        texto = (
            "18.432.765-2\n"
            "Camila Riquelme Soto\n"
            "Banco Estado\n"
            "Chequera Electrónica\n"
            "83270561234\n"
            "camila.riquelme@correo.cl"
        )
        datos = extractor.extract(texto)

        assert datos.rut == "18.432.765-2"
        assert datos.nombre == "Camila Riquelme Soto"
        assert datos.banco == "Banco Estado"
        assert datos.tipo_cuenta == "Chequera Electrónica"
        assert datos.numero_cuenta == "83270561234"
        assert datos.email == "camila.riquelme@correo.cl"

    @pytest.mark.parametrize(
        "tipo", ["Cuenta Corriente", "Cuenta Vista", "Cuenta RUT", "Cuenta Ahorro", "cuenta vista"]
    )
    def test_tipo_de_cuenta_suelto(self, extractor, tipo):
        datos = extractor.extract(f"9.876.543-2\nRoberto Vega\n{tipo}\n5501234567")
        assert datos.tipo_cuenta == tipo
        assert datos.numero_cuenta == "5501234567"

    def test_rut_con_k(self, extractor):
        datos = extractor.extract("15.678.901-K\nDaniela Morales\nScotiabank")
        assert datos.rut == "15.678.901-K"
        assert datos.banco == "Scotiabank"

    def test_numero_de_cuenta_no_se_confunde_con_rut(self, extractor):
        texto = "19.876.543-K\nTomás Bravo\nBanco Ripley\nCuenta Vista\n12345678901\ntbravo@mail.com"
        datos = extractor.extract(texto)
        assert datos.rut == "19.876.543-K"
        assert datos.numero_cuenta == "12345678901"

    def test_numero_de_cuenta_requiere_cuatro_digitos(self, extractor):
        datos = extractor.extract("Ana\n123")
        assert datos.numero_cuenta is None
        assert datos.nombre == "Ana"

    def test_rut_sin_puntos_no_es_rut_suelto(self, extractor):
        """Sin puntos no hay forma de distinguirlo de otra cosa."""
        datos = extractor.extract("14383529-4")
        assert datos.rut is None

    def test_primera_linea_gana_entre_candidatas(self, extractor):
        datos = extractor.extract("Ana\n11112222\n33334444\na@b.cl\nc@d.cl")
        assert datos.numero_cuenta == "11112222"
        assert datos.email == "a@b.cl"

    def test_saltos_de_linea_windows(self, extractor):
        texto = (
            "14.567.890-1\r\nIgnacio Vargas\r\nBanco BCI - Mach\r\n"
            "Cuenta Corriente\r\n7890123456\r\nivargas@correo.cl"
        )
        datos = extractor.extract(texto)

        assert datos.rut == "14.567.890-1"
        assert datos.nombre == "Ignacio Vargas"
        assert datos.banco == "Banco BCI - Mach"
        assert datos.tipo_cuenta == "Cuenta Corriente"
        assert datos.numero_cuenta == "7890123456"
        assert datos.email == "ivargas@correo.cl"

    @pytest.mark.parametrize("linea", ["１２３４５", "١٢٣٤٥"])
    def test_numero_con_digitos_no_ascii_no_es_cuenta(self, extractor, linea):
        datos = extractor.extract(f"Pedro\n{linea}")
        assert datos.numero_cuenta is None
        assert datos.nombre == "Pedro"

    def test_rut_con_digitos_no_ascii_no_es_rut_suelto(self, extractor):
        datos = extractor.extract("Pedro\n１４.３８３.５２９-４")
        assert datos.rut is None

    def test_cuenta_combinada_requiere_digitos_ascii(self, extractor):
        datos = extractor.extract("Pedro\nCuenta Vista Nº ５５５")
        assert datos.numero_cuenta is None

    def test_email_con_dos_puntos_no_es_email_suelto(self, extractor):
        datos = extractor.extract("Ana\nmailto:a@b.cl")
        assert datos.email is None


class TestDeteccionDeBanco:
    """Líneas que son solo un banco del catálogo."""

    @pytest.mark.parametrize(
        "linea, esperado",
        [
            ("Scotiabank", "Scotiabank"),
            ("BCI", "Banco BCI - Mach"),
            ("Coopeuch", "Coopeuch"),
            ("Tenpo", "Tenpo"),
            ("Mercado Pago", "Mercado Pago"),
            ("Global 66", "Global 66"),
            ("Prepago Los Héroes", "Prepago Los Héroes"),
            ("Banco Santander", "Banco Santander"),
            ("banco del estado", "Banco Estado"),
        ],
    )
    def test_banco_sin_etiqueta(self, extractor, linea, esperado):
        texto = f"Juan Pérez\nRUT: 12.345.678-9\nCuenta Corriente Nº 999\n{linea}\njuan@mail.com"
        datos = extractor.extract(texto)
        assert datos.banco == esperado
        assert datos.nombre == "Juan Pérez"

    def test_banco_desconocido_con_prefijo_queda_tal_cual(self, extractor):
        datos = extractor.extract("Juan Pérez\nBanco Inventado del Sur")
        assert datos.banco == "Banco Inventado del Sur"
        assert datos.nombre == "Juan Pérez"

    def test_banco_no_se_confunde_con_nombre(self, extractor):
        texto = "Scotiabank\nRUT: 12.345.678-9\nCuenta Corriente Nº 999\njuan@mail.com"
        datos = extractor.extract(texto)
        assert datos.banco == "Scotiabank"
        assert datos.nombre is None

    def test_catalogo_tiene_prioridad_en_la_misma_linea(self, extractor):
        """'Banco de Chile' está en el catálogo: se usa el nombre oficial."""
        datos = extractor.extract("Ana\nbanco de chile")
        assert datos.banco == "Banco de Chile"

    def test_banco_con_etiqueta_se_normaliza(self, extractor):
        datos = extractor.extract("Banco: scotia")
        assert datos.banco == "Scotiabank"


class TestCatalogoInyectado:
    """El extractor usa el catálogo que recibe, no uno global."""

    def test_catalogo_vacio_no_reconoce_alias(self):
        extractor = FieldExtractor(BankRegistry([]))
        datos = extractor.extract("Ana\nBCI")
        assert datos.banco is None
        assert datos.nombre == "Ana"

    def test_catalogo_vacio_conserva_prefijo_banco(self):
        extractor = FieldExtractor(BankRegistry([]))
        datos = extractor.extract("Ana\nBanco Estado")
        assert datos.banco == "Banco Estado"
