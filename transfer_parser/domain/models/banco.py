"""
Modelo de dominio: Banco del catálogo de instituciones.

Dato estático e inmutable. El catálogo completo vive en
infrastructure/bank_registry.py.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Banco:
    """Institución disponible para transferencias electrónicas."""

    codigo: str
    """Código SBIF. String (no int) para conservar ceros iniciales: '001'."""

    nombre: str
    """Nombre oficial con el que se muestra el banco: 'Banco de Chile'."""

    alias: tuple[str, ...] = ()
    """Formas alternativas en que la gente escribe el banco al compartir
    sus datos ('bci', 'scotia', 'bancoestado'). Se comparan sin importar
    mayúsculas."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not self.codigo or not self.codigo.isdigit():
            raise ValueError(f"Código de banco inválido: '{self.codigo}'")
        if not self.nombre:
            raise ValueError("El nombre del banco no puede estar vacío")

    def coincide(self, texto: str) -> bool:
        """True si el texto (ya en minúsculas y sin espacios extremos) es
        el nombre oficial o alguno de los alias."""
        if self.nombre.lower() == texto:
            return True
        return any(alias.lower() == texto for alias in self.alias)
