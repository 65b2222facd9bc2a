"""Shared fixtures: in-memory database, seeded catalog rows and bearer tokens."""
import os
import pathlib
import sys
from datetime import datetime, timedelta, timezone

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "clave-de-pruebas-para-firmar-tokens-hs256")
os.environ.setdefault("LOG_FORMAT", "text")

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import get_db
from core.models import Base
from core.settings import get_settings
from main import app
from modules.categorias.models import Categoria
from modules.ordenes_trabajo.models import OrdenTrabajo  # noqa: F401
from modules.usuarios.models import Usuario
from modules.vehiculos.models import Vehiculo

USUARIO_CORREO = "tecnico@taller.com"
PLACA = "ABC123"
PLACA_MOTO = "XYZ98D"
CATEGORIA_ID = 1

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_token(secret=None, expires_in=timedelta(hours=1), **claims):
    payload = {"correo": USUARIO_CORREO, "exp": datetime.now(timezone.utc) + expires_in}
    payload.update(claims)
    settings = get_settings()
    return jwt.encode(payload, secret or settings.secret_key, algorithm=settings.jwt_algorithm)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    session.add_all(
        [
            Usuario(correo=USUARIO_CORREO, nombre="Técnico de Turno", rol="tecnico"),
            Vehiculo(placa=PLACA, marca="Chevrolet", modelo="NPR", anio=2019),
            Vehiculo(placa=PLACA_MOTO, marca="Yamaha", modelo="XTZ", anio=2021),
            Categoria(id_categoria=CATEGORIA_ID, nombre="Motor"),
        ]
    )
    session.commit()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def orden_payload():
    return {
        "descripcion": "Cambio de aceite y filtros",
        "tiempo_estimado": 90,
        "tipo_mantenimiento": "preventivo",
        "fk_id_usuario_correo": USUARIO_CORREO,
        "fk_id_vehiculo": PLACA,
        "fk_id_categoria": CATEGORIA_ID,
    }
