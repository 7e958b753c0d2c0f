"""
Servicio de dominio: Extractor de campos de transferencia.

Convierte texto libre (lo que la gente copia y pega desde WhatsApp, un
correo o la app del banco) en un DatosTransferencia.

ESTRATEGIA EN DOS PASADAS:

1. Pasada con etiquetas ("Nombre:", "RUT:", "Banco de destino:", ...).
   Se busca la primera aparición de cada etiqueta en TODO el texto y se
   ordenan por posición. El valor de cada etiqueta es lo que hay entre
   el ':' y el inicio de la SIGUIENTE etiqueta encontrada (o el fin del
   texto), quedándose solo con la primera línea. Así funciona tanto el
   formato multilínea como el de una sola línea:

       Nombre: Juan Pérez Rut: 14383529-4 Banco: Banco Estado

2. Pasada de líneas sueltas, solo para los campos que la primera dejó
   vacíos. Es una lista ORDENADA de reglas "llenar si falta"; cada una
   recibe el registro parcial y devuelve uno nuevo. El orden importa:
   cambiarlo cambia el resultado con entradas ambiguas.

       JORGE ANDRES MIRANDA SOTO
       RUT: 17.654.321-0
       Cuenta Corriente Nº 7019876543
       Banco Ripley
       jorge.miranda@example.com

Nunca lanza excepción: si un campo no se puede determinar, queda en None.
"""

import re
from collections.abc import Callable
from dataclasses import replace

from transfer_parser.domain.models.datos_transferencia import DatosTransferencia
from transfer_parser.domain.models.patron_etiqueta import PatronEtiqueta
from transfer_parser.domain.ports.bank_catalog import BankCatalog
from transfer_parser.domain.shared.text_cleaner import (
    clean_whitespace,
    non_empty_lines,
    normalize_line_endings,
)

# Etiquetas reconocidas por campo. Todas aceptan variantes con y sin
# tilde y terminan en ':' (con espacios opcionales antes).
PATRONES_ETIQUETA: tuple[PatronEtiqueta, ...] = (
    PatronEtiqueta(
        "nombre",
        re.compile(
            r"(?:titular|nombre(?:\s+(?:del?\s+)?titular)?|beneficiario|destinatario)\s*:",
            re.IGNORECASE,
        ),
    ),
    PatronEtiqueta(
        "rut",
        re.compile(r"(?:rut|r\.u\.t\.?)\s*:", re.IGNORECASE),
    ),
    PatronEtiqueta(
        "banco",
        re.compile(
            r"(?:banco(?:\s+(?:de\s+)?destino)?|instituci[oó]n(?:\s+financiera)?)\s*:",
            re.IGNORECASE,
        ),
    ),
    PatronEtiqueta(
        "tipo_cuenta",
        re.compile(r"(?:tipo\s+(?:de\s+)?cuenta)\s*:", re.IGNORECASE),
    ),
    PatronEtiqueta(
        "numero_cuenta",
        re.compile(
            r"(?:n[º°#]?\s*(?:de\s+)?cuenta|cuenta\s*n[º°#]?|n[uú]mero\s*(?:de\s+)?cuenta)\s*:",
            re.IGNORECASE,
        ),
    ),
    PatronEtiqueta(
        "email",
        re.compile(r"(?:e-?mail|correo(?:\s+electr[oó]nico)?)\s*:", re.IGNORECASE),
    ),
)

_TIPOS_CUENTA = r"cuenta\s+(?:corriente|vista|rut|ahorro)|chequera\s+electr[oó]nica"

# "Cuenta Corriente Nº 4014593894" → tipo + número en una sola línea
_CUENTA_COMBINADA = re.compile(rf"({_TIPOS_CUENTA})\s+n[º°#]?\s*([0-9]+)", re.IGNORECASE)
_TIPO_CUENTA_SUELTO = re.compile(rf"^(?:{_TIPOS_CUENTA})$", re.IGNORECASE)

# RUT con puntos y guión: "12.345.678-9", "9.876.543-K"
_RUT_SUELTO = re.compile(r"^[0-9]{1,3}(?:\.[0-9]{3})+-[0-9kK]$")
# Un RUT suelto tiene puntos y guión, nunca es solo dígitos.
_NUMERO_CUENTA_SUELTO = re.compile(r"^[0-9]{4,}$")
_SOLO_DIGITOS = re.compile(r"^[0-9]+$")
_EMAIL_SUELTO = re.compile(r"^[^\s:]+@\S+\.\S+$")
_PREFIJO_BANCO = re.compile(r"^banco\s+\S", re.IGNORECASE)

# Usados solo para descartar candidatas a nombre
_ETIQUETA_RUT = re.compile(r"^(?:rut\s*:|r\.u\.t)", re.IGNORECASE)
_INICIA_BANCO = re.compile(r"^banco\s", re.IGNORECASE)
_INICIA_CUENTA = re.compile(r"^cuenta\s", re.IGNORECASE)
_ETIQUETA_NOMBRE = re.compile(
    r"^(?:nombre|titular|beneficiario|destinatario)\s*:", re.IGNORECASE
)
_OTRAS_ETIQUETAS = re.compile(
    r"^(?:tipo\s+de\s+cuenta|numero|n[º°#]|email|e-?mail|correo|instituci[oó]n)\s*:",
    re.IGNORECASE,
)
_ENCABEZADO_SECCION = re.compile(r":\s*$")

Regla = Callable[[DatosTransferencia, str, list[str]], DatosTransferencia]


class FieldExtractor:
    """Extrae los campos de una transferencia desde texto libre.

    Recibe el catálogo de bancos por constructor (Dependency Injection):
    no sabe si es el catálogo chileno completo o uno de prueba.
    """

    def __init__(self, catalogo: BankCatalog) -> None:
        """
        Args:
            catalogo: Catálogo para reconocer líneas que son solo un nombre
                      de banco y normalizar el banco al nombre oficial.
        """
        self._catalogo = catalogo

        # Pasada 2, en orden de aplicación.
        self._reglas: tuple[Regla, ...] = (
            self._regla_cuenta_combinada,
            self._regla_rut_suelto,
            self._regla_tipo_cuenta_suelto,
            self._regla_numero_cuenta_suelto,
            self._regla_email_suelto,
            self._regla_banco_suelto,
            self._regla_nombre_suelto,
            self._regla_normalizar_banco,
        )

        # Una línea que cumple CUALQUIERA de estas condiciones no puede ser
        # el nombre del titular. Se evalúan en este orden y se corta en la
        # primera que se cumple.
        self._exclusiones_nombre: tuple[Callable[[str], bool], ...] = (
            lambda linea: _ETIQUETA_RUT.match(linea) is not None,
            lambda linea: "@" in linea,
            lambda linea: _INICIA_BANCO.match(linea) is not None,
            lambda linea: self._catalogo.match_line(linea) is not None,
            lambda linea: _INICIA_CUENTA.match(linea) is not None,
            lambda linea: _TIPO_CUENTA_SUELTO.match(linea) is not None,
            lambda linea: _SOLO_DIGITOS.match(linea) is not None,
            lambda linea: _RUT_SUELTO.match(linea) is not None,
            lambda linea: _ETIQUETA_NOMBRE.match(linea) is not None,
            lambda linea: _OTRAS_ETIQUETAS.match(linea) is not None,
            lambda linea: any(p.inicia_linea(linea) for p in PATRONES_ETIQUETA),
            lambda linea: _ENCABEZADO_SECCION.search(linea) is not None,
        )

    def extract(self, text: str | None) -> DatosTransferencia:
        """Extrae los campos del texto.

        Args:
            text: Texto libre, con saltos de línea \\n, \\r\\n o \\r.

        Returns:
            DatosTransferencia con los campos encontrados. Para texto vacío,
            None o solo espacios, un registro sin ningún campo.
        """
        if not text or not text.strip():
            return DatosTransferencia()

        texto = normalize_line_endings(text).strip()
        lineas = non_empty_lines(texto)

        datos = self._extraer_etiquetados(texto)
        for regla in self._reglas:
            datos = regla(datos, texto, lineas)
        return datos

    # =================================================================
    # Pasada 1: campos con etiqueta
    # =================================================================

    def _extraer_etiquetados(self, texto: str) -> DatosTransferencia:
        """Segmenta el texto por etiquetas, de izquierda a derecha.

        El valor de una etiqueta termina donde empieza la siguiente
        etiqueta encontrada, sea del campo que sea. Por eso dos etiquetas
        nunca se traslapan.
        """
        encontradas: list[tuple[int, int, str]] = []
        for etiqueta in PATRONES_ETIQUETA:
            match = etiqueta.buscar(texto)
            if match:
                encontradas.append((match.start(), match.end(), etiqueta.campo))

        encontradas.sort(key=lambda e: e[0])

        valores: dict[str, str] = {}
        for i, (_, fin_etiqueta, campo) in enumerate(encontradas):
            fin_valor = encontradas[i + 1][0] if i + 1 < len(encontradas) else len(texto)
            # Solo la primera línea: en el formato compacto una etiqueta
            # sin vecina absorbería todas las líneas siguientes.
            valor = texto[fin_etiqueta:fin_valor].split("\n")[0].strip()
            if valor:
                valores[campo] = valor

        return DatosTransferencia(**valores)

    # =================================================================
    # Pasada 2: líneas sueltas
    # =================================================================

    @staticmethod
    def _regla_cuenta_combinada(
        datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        """'Cuenta Vista Nº 55' llena tipo y número a la vez.

        Se busca en el texto completo, no línea por línea.
        """
        if datos.tipo_cuenta and datos.numero_cuenta:
            return datos

        match = _CUENTA_COMBINADA.search(texto)
        if not match:
            return datos

        return replace(
            datos,
            tipo_cuenta=datos.tipo_cuenta or clean_whitespace(match.group(1)),
            numero_cuenta=datos.numero_cuenta or match.group(2),
        )

    @staticmethod
    def _regla_rut_suelto(
        datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        if datos.rut:
            return datos
        linea = _primera_que_coincide(lineas, _RUT_SUELTO)
        return replace(datos, rut=linea) if linea else datos

    @staticmethod
    def _regla_tipo_cuenta_suelto(
        datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        if datos.tipo_cuenta:
            return datos
        linea = _primera_que_coincide(lineas, _TIPO_CUENTA_SUELTO)
        return replace(datos, tipo_cuenta=linea) if linea else datos

    @staticmethod
    def _regla_numero_cuenta_suelto(
        datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        if datos.numero_cuenta:
            return datos
        linea = _primera_que_coincide(lineas, _NUMERO_CUENTA_SUELTO)
        return replace(datos, numero_cuenta=linea) if linea else datos

    @staticmethod
    def _regla_email_suelto(
        datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        if datos.email:
            return datos
        linea = _primera_que_coincide(lineas, _EMAIL_SUELTO)
        return replace(datos, email=linea) if linea else datos

    def _regla_banco_suelto(
        self, datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        """Primera línea sin ':' que es un banco del catálogo o empieza
        con 'Banco ...'. Para cada línea el catálogo tiene prioridad."""
        if datos.banco:
            return datos

        for linea in lineas:
            if ":" in linea:
                continue
            banco = self._catalogo.match_line(linea)
            if banco is not None:
                return replace(datos, banco=banco.nombre)
            if _PREFIJO_BANCO.match(linea):
                return replace(datos, banco=linea)
        return datos

    def _regla_nombre_suelto(
        self, datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        """El nombre es la primera línea que no reclama ningún otro patrón."""
        if datos.nombre:
            return datos

        for linea in lineas:
            if any(excluye(linea) for excluye in self._exclusiones_nombre):
                continue
            return replace(datos, nombre=linea)
        return datos

    def _regla_normalizar_banco(
        self, datos: DatosTransferencia, texto: str, lineas: list[str]
    ) -> DatosTransferencia:
        """'BCI' → 'Banco BCI - Mach'. Si no está en el catálogo, se deja
        el texto tal cual."""
        if not datos.banco:
            return datos
        banco = self._catalogo.match_line(datos.banco)
        if banco is None:
            return datos
        return replace(datos, banco=banco.nombre)


def _primera_que_coincide(lineas: list[str], patron: re.Pattern[str]) -> str | None:
    """Primera línea (en orden del documento) que cumple el patrón."""
    for linea in lineas:
        if patron.match(linea):
            return linea
    return None
