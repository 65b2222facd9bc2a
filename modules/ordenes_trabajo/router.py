from typing import Annotated, List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import validate_token
from modules.ordenes_trabajo import schemas, service

IdOrden = Annotated[int, Path(gt=0, le=schemas.MAX_DB_INT, description="ID de la orden de trabajo")]

ERROR_500 = {500: {"description": "Error interno del servidor"}}

router = APIRouter(
    prefix="/ordenesTrabajo",
    tags=["Órdenes de Trabajo"],
    dependencies=[Depends(validate_token)],
    responses={401: {"description": "Token no proporcionado o no válido"}, **ERROR_500},
)


@router.post(
    "/newOrden",
    response_model=schemas.OrdenTrabajoMensaje,
    summary="Crear nueva orden de trabajo",
    description="Crea una nueva orden de trabajo en la base de datos.",
    responses={
        400: {"description": "Error en la solicitud o falta de campos requeridos"},
        404: {"description": "No se encontró el usuario o vehículo asociado"},
    },
)
def new_orden_endpoint(orden_in: schemas.OrdenTrabajoCreate, db: Session = Depends(get_db)):
    return service.crear_orden(db, orden_in)


@router.put(
    "/finalizarOrden/{id_orden_trabajo}",
    response_model=schemas.OrdenTrabajoMensaje,
    summary="Finalizar orden de trabajo",
    description="Actualiza una orden de trabajo para marcarla como finalizada.",
    responses={404: {"description": "No se encontró la orden de trabajo especificada"}},
)
def finalizar_orden_endpoint(
    datos: schemas.OrdenTrabajoFinalizar,
    id_orden_trabajo: IdOrden,
    db: Session = Depends(get_db),
):
    return service.finalizar_orden(db, id_orden_trabajo, datos)


@router.put(
    "/aprobarOrden/{id_orden_trabajo}",
    response_model=schemas.OrdenTrabajoMensaje,
    summary="Aprobar orden de trabajo",
    description="Actualiza una orden de trabajo para marcarla como aprobada.",
    responses={404: {"description": "No se encontró la orden de trabajo especificada"}},
)
def aprobar_orden_endpoint(id_orden_trabajo: IdOrden, db: Session = Depends(get_db)):
    return service.aprobar_orden(db, id_orden_trabajo)


@router.get(
    "/getAll/{estado}",
    response_model=List[schemas.OrdenTrabajoRead],
    summary="Obtener órdenes de trabajo por estado",
    description="Obtiene todas las órdenes de trabajo filtradas por estado.",
    responses={
        400: {"description": "Falta el estado en la solicitud"},
        404: {"description": "No se encontraron órdenes de trabajo con ese estado"},
    },
)
def get_ordenes_by_estado_endpoint(estado: str, db: Session = Depends(get_db)):
    return service.listar_por_estado(db, estado)


@router.get(
    "/orden/{id_orden_trabajo}",
    response_model=schemas.OrdenTrabajoRead,
    summary="Obtener una orden de trabajo",
    description="Obtiene una orden de trabajo especificando su id.",
    responses={
        400: {"description": "Falta el id en la solicitud"},
        404: {"description": "No se encontró la orden de trabajo con el id especificado"},
    },
)
def get_orden_by_id_endpoint(id_orden_trabajo: IdOrden, db: Session = Depends(get_db)):
    return service.obtener_orden(db, id_orden_trabajo)


@router.get(
    "/orden/vehiculo/{id_vehiculo}",
    response_model=schemas.OrdenesPorVehiculo,
    summary="Obtener órdenes de trabajo por vehículo",
    description="Obtiene todas las órdenes de trabajo asociadas a un vehículo específico.",
    responses={
        400: {"description": "La placa del vehículo es requerida o tiene un formato inválido"},
        404: {"description": "No se encontraron órdenes de trabajo asociadas a la placa del vehículo especificado"},
    },
)
def get_ordenes_by_vehiculo_endpoint(id_vehiculo: str, db: Session = Depends(get_db)):
    return service.listar_por_vehiculo(db, id_vehiculo)
