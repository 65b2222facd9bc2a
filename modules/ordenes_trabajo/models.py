from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from core.models import Base, TimestampMixin
from modules.ordenes_trabajo.types import EstadoOrden


class OrdenTrabajo(Base, TimestampMixin):
    __tablename__ = "ordenes_trabajo"

    id_orden_trabajo = Column(Integer, primary_key=True, index=True, autoincrement=True)
    descripcion = Column(Text, nullable=False)
    tiempo_estimado = Column(Integer, nullable=False)
    tipo_mantenimiento = Column(String(32), nullable=False)
    estado = Column(String(32), nullable=False, default=EstadoOrden.PENDIENTE.value, index=True)
    observaciones = Column(Text, nullable=True)
    tiempo_ejecucion = Column(Integer, nullable=True)
    fecha_aprobacion = Column(DateTime, nullable=True)
    fecha_finalizacion = Column(DateTime, nullable=True)

    fk_id_usuario_correo = Column(String(255), ForeignKey("usuarios.correo", ondelete="RESTRICT"), nullable=False)
    fk_id_vehiculo = Column(String(16), ForeignKey("vehiculos.placa", ondelete="RESTRICT"), nullable=False, index=True)
    fk_id_categoria = Column(Integer, ForeignKey("categorias.id_categoria", ondelete="RESTRICT"), nullable=False)

    usuario = relationship("Usuario")
    vehiculo = relationship("Vehiculo")
    categoria = relationship("Categoria")
