from enum import Enum


class EstadoOrden(str, Enum):
    PENDIENTE = "pendiente"
    APROBADA = "aprobada"
    FINALIZADA = "finalizada"


class TipoMantenimiento(str, Enum):
    PREVENTIVO = "preventivo"
    CORRECTIVO = "correctivo"
