import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from core.errors import BadRequestException, NotFoundException
from modules.categorias.models import Categoria
from modules.ordenes_trabajo import models, schemas
from modules.ordenes_trabajo.types import EstadoOrden
from modules.usuarios.models import Usuario
from modules.vehiculos.models import Vehiculo, normalizar_placa

logger = logging.getLogger(__name__)


def crear_orden(db: Session, orden_in: schemas.OrdenTrabajoCreate) -> Dict[str, Any]:
    placa = normalizar_placa(orden_in.fk_id_vehiculo)
    if placa is None:
        raise BadRequestException("La placa del vehículo tiene un formato inválido")

    if db.get(Usuario, orden_in.fk_id_usuario_correo) is None:
        raise NotFoundException("No se encontró el usuario asociado")
    if db.get(Vehiculo, placa) is None:
        raise NotFoundException("No se encontró el vehículo asociado")
    if db.get(Categoria, orden_in.fk_id_categoria) is None:
        raise NotFoundException("No se encontró la categoría asociada")

    orden = models.OrdenTrabajo(
        descripcion=orden_in.descripcion,
        tiempo_estimado=orden_in.tiempo_estimado,
        tipo_mantenimiento=orden_in.tipo_mantenimiento.value,
        estado=EstadoOrden.PENDIENTE.value,
        fk_id_usuario_correo=orden_in.fk_id_usuario_correo,
        fk_id_vehiculo=placa,
        fk_id_categoria=orden_in.fk_id_categoria,
    )
    db.add(orden)
    db.commit()
    db.refresh(orden)
    logger.info(
        "Orden de trabajo creada",
        extra={"id_orden_trabajo": orden.id_orden_trabajo, "placa": placa},
    )
    return {"msg": "Orden de trabajo creada exitosamente", "ordenTrabajo": _serialize_orden(orden)}


def finalizar_orden(db: Session, id_orden_trabajo: int, datos: schemas.OrdenTrabajoFinalizar) -> Dict[str, Any]:
    orden = _get_orden_model(db, id_orden_trabajo)
    orden.estado = EstadoOrden.FINALIZADA.value
    orden.observaciones = datos.observaciones
    orden.tiempo_ejecucion = datos.tiempo_ejecucion
    orden.fecha_finalizacion = _now()
    db.commit()
    db.refresh(orden)
    logger.info(
        "Orden de trabajo finalizada",
        extra={"id_orden_trabajo": id_orden_trabajo, "estado": orden.estado},
    )
    return {"msg": "Orden de trabajo finalizada exitosamente", "ordenTrabajo": _serialize_orden(orden)}


def aprobar_orden(db: Session, id_orden_trabajo: int) -> Dict[str, Any]:
    orden = _get_orden_model(db, id_orden_trabajo)
    orden.estado = EstadoOrden.APROBADA.value
    orden.fecha_aprobacion = _now()
    db.commit()
    db.refresh(orden)
    logger.info(
        "Orden de trabajo aprobada",
        extra={"id_orden_trabajo": id_orden_trabajo, "estado": orden.estado},
    )
    return {"msg": "Orden de trabajo aprobada exitosamente", "ordenTrabajo": _serialize_orden(orden)}


def listar_por_estado(db: Session, estado: Optional[str]) -> List[Dict[str, Any]]:
    estado_orden = _parse_estado(estado)
    ordenes = (
        db.query(models.OrdenTrabajo)
        .filter(models.OrdenTrabajo.estado == estado_orden.value)
        .order_by(models.OrdenTrabajo.id_orden_trabajo)
        .all()
    )
    if not ordenes:
        raise NotFoundException(f"No se encontraron órdenes de trabajo con estado '{estado_orden.value}'")
    return [_serialize_orden(o) for o in ordenes]


def obtener_orden(db: Session, id_orden_trabajo: int) -> Dict[str, Any]:
    return _serialize_orden(_get_orden_model(db, id_orden_trabajo))


def listar_por_vehiculo(db: Session, id_vehiculo: Optional[str]) -> Dict[str, Any]:
    if id_vehiculo is None or not id_vehiculo.strip():
        raise BadRequestException("La placa del vehículo es requerida")
    placa = normalizar_placa(id_vehiculo)
    if placa is None:
        raise BadRequestException("La placa del vehículo tiene un formato inválido")

    ordenes = (
        db.query(models.OrdenTrabajo)
        .filter(models.OrdenTrabajo.fk_id_vehiculo == placa)
        .order_by(models.OrdenTrabajo.id_orden_trabajo)
        .all()
    )
    if not ordenes:
        raise NotFoundException("No se encontraron órdenes de trabajo asociadas a la placa del vehículo especificado")
    return {"ordenesTrabajo": [_serialize_orden(o) for o in ordenes]}


def _parse_estado(estado: Optional[str]) -> EstadoOrden:
    if estado is None or not estado.strip():
        raise BadRequestException("Falta el estado en la solicitud")
    try:
        return EstadoOrden(estado.strip().lower())
    except ValueError:
        validos = ", ".join(e.value for e in EstadoOrden)
        raise BadRequestException(f"Estado inválido, valores permitidos: {validos}") from None


def _get_orden_model(db: Session, id_orden_trabajo: int) -> models.OrdenTrabajo:
    orden = (
        db.query(models.OrdenTrabajo)
        .filter(models.OrdenTrabajo.id_orden_trabajo == id_orden_trabajo)
        .first()
    )
    if not orden:
        raise NotFoundException("No se encontró la orden de trabajo especificada")
    return orden


def _serialize_orden(orden: models.OrdenTrabajo) -> Dict[str, Any]:
    return schemas.OrdenTrabajoRead.model_validate(orden).model_dump()


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
