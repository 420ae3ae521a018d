import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from contract_hub.db import Base
from contract_hub.enums import FieldType
from contract_hub.models import blueprints as _blueprint_models  # noqa: F401
from contract_hub.models import contracts as _contract_models  # noqa: F401
from contract_hub.schemas.blueprints import BlueprintCreate, BlueprintFieldCreate
from contract_hub.schemas.contracts import ContractCreate
from contract_hub.services import blueprints as blueprints_service
from contract_hub.services import contracts as contracts_service


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite needs explicit BEGIN handling for SAVEPOINT to work.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def db_session(engine):
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autoflush=False,
        autocommit=False,
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture()
def blueprint(db_session):
    """Blueprint with a single required text field labelled "Client Name"."""
    blueprint = blueprints_service.blueprints.create(
        db_session, BlueprintCreate(name="Service Agreement", description="Standard terms")
    )
    blueprints_service.blueprint_fields.create(
        db_session,
        str(blueprint.id),
        BlueprintFieldCreate(field_type=FieldType.text, label="Client Name", required=True),
    )
    return blueprint


@pytest.fixture()
def client_name_field(db_session, blueprint):
    return blueprints_service.blueprint_fields.list_for_blueprint(db_session, blueprint.id)[0]


@pytest.fixture()
def full_blueprint(db_session):
    """Blueprint with one field of each type."""
    blueprint = blueprints_service.blueprints.create(
        db_session, BlueprintCreate(name="Employment Offer")
    )
    for field_type, label, required in (
        (FieldType.text, "Employee Name", True),
        (FieldType.date, "Start Date", True),
        (FieldType.checkbox, "Accepts Terms", True),
        (FieldType.signature, "Signature", False),
    ):
        blueprints_service.blueprint_fields.create(
            db_session,
            str(blueprint.id),
            BlueprintFieldCreate(field_type=field_type, label=label, required=required),
        )
    return blueprint


@pytest.fixture()
def contract(db_session, blueprint):
    return contracts_service.contracts.create(
        db_session, ContractCreate(blueprint_id=blueprint.id, name="Acme - Service Agreement")
    )


@pytest.fixture()
def filled_contract(db_session, contract, client_name_field):
    contracts_service.contract_field_values.upsert(
        db_session, contract.id, client_name_field.id, "Jane Doe"
    )
    return contract
