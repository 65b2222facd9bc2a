from sqlalchemy import Column, Integer, String

from core.models import Base, TimestampMixin


class Categoria(Base, TimestampMixin):
    __tablename__ = "categorias"

    id_categoria = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
