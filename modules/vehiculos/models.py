import re
from typing import Optional

from sqlalchemy import Column, Integer, String

from core.models import Base, TimestampMixin

# Cars use ABC123, motorcycles ABC12D
PLACA_PATTERN = re.compile(r"^[A-Z]{3}[0-9]{2}[A-Z0-9]$")


class Vehiculo(Base, TimestampMixin):
    __tablename__ = "vehiculos"

    placa = Column(String(16), primary_key=True, index=True)
    marca = Column(String(128), nullable=True)
    modelo = Column(String(128), nullable=True)
    anio = Column(Integer, nullable=True)


def normalizar_placa(placa: Optional[str]) -> Optional[str]:
    """Return the upper-cased plate, or None when it is blank or malformed."""
    if placa is None:
        return None
    candidate = placa.strip().upper().replace("-", "").replace(" ", "")
    if not PLACA_PATTERN.match(candidate):
        return None
    return candidate
