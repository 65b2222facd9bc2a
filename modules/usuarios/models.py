from sqlalchemy import Column, String

from core.models import Base, TimestampMixin


class Usuario(Base, TimestampMixin):
    __tablename__ = "usuarios"

    correo = Column(String(255), primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
    rol = Column(String(64), nullable=False, default="tecnico")
