"""
Registro de bancos chilenos disponibles para transferencias electrónicas.

Centraliza el catálogo código SBIF → nombre oficial → alias. Agregar un
banco al sistema requiere solo agregar una entrada a _BANCOS_CHILE.

El registro es de solo lectura: se arma una vez al crearlo y nunca se
modifica, así que una misma instancia se puede compartir entre todos
los FieldExtractor sin coordinación.
"""

import re
from collections.abc import Iterable, Iterator

from transfer_parser.domain.models.banco import Banco
from transfer_parser.domain.ports.bank_catalog import BankCatalog

# Cada entrada: (código SBIF, nombre oficial, alias).
# El orden importa: ante un alias repetido gana el primero de la lista.
_BANCOS_CHILE: list[tuple[str, str, tuple[str, ...]]] = [
    ("001", "Banco de Chile", ("chile", "bch")),
    ("009", "Banco Internacional", ("internacional",)),
    ("012", "Banco Estado", ("bancoestado", "banco del estado", "estado")),
    ("014", "Scotiabank", ("scotiabank chile", "scotia")),
    ("016", "Banco BCI - Mach", ("bci", "mach", "banco bci")),
    ("028", "Banco BICE", ("bice",)),
    ("031", "Banco HSBC", ("hsbc",)),
    ("037", "Banco Santander", ("santander", "santander chile")),
    (
        "039",
        "Banco Itaú",
        ("itau", "itaú", "itaú corpbanca", "itau corpbanca", "corpbanca"),
    ),
    ("049", "Banco Security", ("security",)),
    ("051", "Banco Falabella", ("falabella",)),
    ("053", "Banco Ripley", ("ripley",)),
    ("055", "Banco Consorcio", ("consorcio",)),
    ("059", "Banco BTG Pactual Chile", ("btg", "btg pactual")),
    ("672", "Coopeuch", ()),
    ("729", "Prepago Los Héroes", ("los heroes", "los héroes", "prepago los heroes")),
    ("730", "Tenpo", ()),
    ("732", "Prepago Los Andes (Tapp)", ("tapp", "los andes", "prepago los andes")),
    ("738", "Global 66", ("global66",)),
    ("875", "Mercado Pago", ("mercadopago",)),
]

# "Banco ", "Banco de ", "Banco del ", "Banco de la " al inicio de la línea.
_PREFIJO_BANCO = re.compile(r"^banco\s+(?:de\s+la\s+|del?\s+)?", re.IGNORECASE)


class BankRegistry(BankCatalog):
    """Catálogo de bancos en memoria, de solo lectura."""

    def __init__(self, bancos: Iterable[Banco]) -> None:
        """
        Args:
            bancos: Bancos del catálogo, en orden de prioridad.

        Raises:
            ValueError: Si hay dos bancos con el mismo código.
        """
        self._bancos: tuple[Banco, ...] = tuple(bancos)

        codigos: set[str] = set()
        for banco in self._bancos:
            if banco.codigo in codigos:
                raise ValueError(
                    f"Ya existe un banco registrado con el código '{banco.codigo}'. "
                    f"No se puede registrar '{banco.nombre}'."
                )
            codigos.add(banco.codigo)

    def find_exact(self, text: str | None) -> Banco | None:
        if not text:
            return None
        buscado = text.strip().lower()
        for banco in self._bancos:
            if banco.coincide(buscado):
                return banco
        return None

    def match_line(self, line: str | None) -> Banco | None:
        if not line:
            return None

        directo = self.find_exact(line)
        if directo is not None:
            return directo

        # Una sola pasada: "Banco de Chile" → "Chile" → alias "chile"
        sin_prefijo = _PREFIJO_BANCO.sub("", line.strip(), count=1).strip()
        if sin_prefijo and sin_prefijo != line.strip():
            return self.find_exact(sin_prefijo)
        return None

    def get(self, codigo: str) -> Banco | None:
        """Obtiene un banco por su código SBIF."""
        for banco in self._bancos:
            if banco.codigo == codigo:
                return banco
        return None

    @property
    def available_banks(self) -> list[str]:
        """Nombres oficiales de los bancos registrados, en orden del catálogo."""
        return [banco.nombre for banco in self._bancos]

    def __iter__(self) -> Iterator[Banco]:
        return iter(self._bancos)

    def __len__(self) -> int:
        return len(self._bancos)


def create_default_registry() -> BankRegistry:
    """Crea el registro con todos los bancos chilenos conocidos.

    Returns:
        BankRegistry con los bancos e instituciones de pago que aceptan
        transferencias electrónicas.
    """
    return BankRegistry(
        Banco(codigo=codigo, nombre=nombre, alias=alias)
        for codigo, nombre, alias in _BANCOS_CHILE
    )
