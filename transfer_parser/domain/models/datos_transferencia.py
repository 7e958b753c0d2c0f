"""
Modelo de dominio: Datos de una transferencia bancaria.

Es el objeto central que fluye por toda la arquitectura:
- Lo PRODUCE el FieldExtractor a partir de texto libre.
- Lo CONSUME el formateador canónico (build_output).
- Lo puede CONSTRUIR la capa de interfaz a partir de campos editados
  por el usuario (desde_dict).

Todos los campos son opcionales: "no se pudo determinar el campo" se
representa como None, nunca como una excepción.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields

# Orden canónico de salida: RUT → nombre → banco → tipo → número → email.
# build_output y campos_faltantes dependen de este orden.
CAMPOS_CANONICOS: tuple[str, ...] = (
    "rut",
    "nombre",
    "banco",
    "tipo_cuenta",
    "numero_cuenta",
    "email",
)


@dataclass(frozen=True)
class DatosTransferencia:
    """Datos de la cuenta de destino de una transferencia.

    frozen=True porque el extractor nunca modifica un registro: cada
    regla devuelve una copia nueva con dataclasses.replace().
    """

    nombre: str | None = None
    """Nombre del titular. Ejemplo: 'Juan Pérez'."""

    rut: str | None = None
    """RUT tal como apareció en el texto. Puede venir sin formato
    ('143835294') o formateado ('14.383.529-4'). format_rut lo normaliza
    al generar la salida."""

    banco: str | None = None
    """Nombre del banco. Si se reconoce en el catálogo, es el nombre
    oficial ('Banco BCI - Mach'), no el texto original ('BCI')."""

    tipo_cuenta: str | None = None
    """Tipo de cuenta: 'Cuenta Corriente', 'Cuenta Vista', 'Cuenta RUT', etc."""

    numero_cuenta: str | None = None
    """Número de cuenta. String porque puede tener ceros iniciales."""

    email: str | None = None
    """Correo del destinatario."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        for campo in fields(self):
            valor = getattr(self, campo.name)
            if valor is None:
                continue
            if not isinstance(valor, str):
                raise ValueError(f"El campo '{campo.name}' debe ser texto: {valor!r}")
            if not valor or valor != valor.strip():
                raise ValueError(
                    f"El campo '{campo.name}' no puede estar vacío ni tener "
                    f"espacios al inicio/final: {valor!r}"
                )
            if "\n" in valor or "\r" in valor:
                raise ValueError(f"El campo '{campo.name}' no puede tener saltos de línea")

    @classmethod
    def desde_dict(cls, valores: Mapping[str, str | None]) -> "DatosTransferencia":
        """Construye un registro a partir de un diccionario de campos.

        Pensado para los valores que vienen de un formulario editable:
        se hace strip de cada valor y los vacíos se consideran ausentes.

        Raises:
            ValueError: Si hay una clave que no es un campo conocido.
        """
        desconocidos = set(valores) - set(CAMPOS_CANONICOS)
        if desconocidos:
            raise ValueError(f"Campos desconocidos: {sorted(desconocidos)}")

        limpios: dict[str, str] = {}
        for clave, valor in valores.items():
            if valor is None:
                continue
            valor = valor.strip()
            if valor:
                limpios[clave] = valor
        return cls(**limpios)

    def to_dict(self) -> dict[str, str]:
        """Devuelve solo los campos presentes, en orden canónico."""
        return {
            campo: getattr(self, campo)
            for campo in CAMPOS_CANONICOS
            if getattr(self, campo) is not None
        }

    @property
    def campos_faltantes(self) -> list[str]:
        """Campos sin valor, en orden canónico."""
        return [campo for campo in CAMPOS_CANONICOS if getattr(self, campo) is None]

    @property
    def esta_vacio(self) -> bool:
        """Indica si no se encontró ningún campo."""
        return len(self.campos_faltantes) == len(CAMPOS_CANONICOS)
