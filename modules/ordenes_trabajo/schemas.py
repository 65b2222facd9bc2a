from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.ordenes_trabajo.types import TipoMantenimiento

# Largest value an SQL BIGINT column can hold
MAX_DB_INT = 2**63 - 1


class OrdenTrabajoCreate(BaseModel):
    descripcion: str = Field(..., min_length=1, description="Descripción del trabajo a realizar")
    tiempo_estimado: int = Field(..., gt=0, le=MAX_DB_INT, description="Tiempo estimado en minutos")
    tipo_mantenimiento: TipoMantenimiento
    fk_id_usuario_correo: str = Field(..., min_length=1, description="Correo del usuario que registra la orden")
    fk_id_vehiculo: str = Field(..., min_length=1, description="Placa del vehículo")
    fk_id_categoria: int = Field(..., gt=0, le=MAX_DB_INT)

    @field_validator("descripcion", "fk_id_usuario_correo", "fk_id_vehiculo")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El campo no puede estar vacío")
        return v.strip()


class OrdenTrabajoFinalizar(BaseModel):
    observaciones: Optional[str] = None
    tiempo_ejecucion: Optional[int] = Field(None, ge=0, le=MAX_DB_INT, description="Tiempo de ejecución en minutos")


class OrdenTrabajoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_orden_trabajo: int
    descripcion: str
    tiempo_estimado: int
    tipo_mantenimiento: str
    estado: str
    observaciones: Optional[str] = None
    tiempo_ejecucion: Optional[int] = None
    fecha_aprobacion: Optional[datetime] = None
    fecha_finalizacion: Optional[datetime] = None
    fk_id_usuario_correo: str
    fk_id_vehiculo: str
    fk_id_categoria: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrdenTrabajoMensaje(BaseModel):
    msg: str
    ordenTrabajo: OrdenTrabajoRead


class OrdenesPorVehiculo(BaseModel):
    ordenesTrabajo: List[OrdenTrabajoRead] = Field(default_factory=list)
