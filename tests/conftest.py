import os
import tempfile
import uuid

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_qualityprofiles.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["DEFAULT_ORGANIZATION_KEY"] = "default-organization"
os.environ["LANGUAGES"] = "java:Java,js:JavaScript,py:Python"
os.environ["RUN_STARTUP_TASKS"] = "false"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from app.main import app
from app.db.models.component import (
    Component as ComponentModel,
    QUALIFIER_MODULE,
    QUALIFIER_PROJECT,
    SCOPE_PROJECT,
)
from app.db.models.organization import Organization as OrganizationModel
from app.db.models.quality_profile import (
    ProjectQualityProfile as ProjectQualityProfileModel,
    QualityProfile as QualityProfileModel,
)
from app.domain.languages import Languages


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the schema and the default organization
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    db.info["session_factory"] = TestingSessionLocal
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def languages() -> Languages:
    return Languages.from_setting(os.environ["LANGUAGES"])


@pytest.fixture(scope="function")
def organization(db: Session) -> OrganizationModel:
    """The default organization created by migration 001."""
    org = (
        db.query(OrganizationModel)
        .filter(OrganizationModel.kee == "default-organization")
        .first()
    )
    if not org:
        raise RuntimeError("Default organization not found. Check migration 001.")
    return org


@pytest.fixture(scope="function")
def other_organization(db: Session) -> OrganizationModel:
    org = OrganizationModel(uuid=str(uuid.uuid4()), kee="other-org", name="Other")
    db.add(org)
    db.commit()
    db.refresh(org)
    return org


@pytest.fixture(scope="function")
def make_profile(db: Session, organization: OrganizationModel):
    """Factory inserting a quality profile."""

    def _make(
        name: str,
        language: str,
        is_default: bool = False,
        parent_kee: str | None = None,
        org: OrganizationModel | None = None,
    ) -> QualityProfileModel:
        org = org or organization
        profile = QualityProfileModel(
            kee=f"{language}-{name.lower().replace(' ', '-')}-{uuid.uuid4().hex[:8]}",
            name=name,
            language=language,
            organization_uuid=org.uuid,
            parent_kee=parent_kee,
            is_default=is_default,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    return _make


@pytest.fixture(scope="function")
def default_profiles(make_profile) -> dict[str, QualityProfileModel]:
    """A default profile for every installed language."""
    return {
        "java": make_profile("Sonar way", "java", is_default=True),
        "js": make_profile("Sonar way", "js", is_default=True),
        "py": make_profile("Sonar way", "py", is_default=True),
    }


@pytest.fixture(scope="function")
def project(db: Session, organization: OrganizationModel) -> ComponentModel:
    project_uuid = str(uuid.uuid4())
    component = ComponentModel(
        uuid=project_uuid,
        kee="my-project",
        name="My Project",
        scope=SCOPE_PROJECT,
        qualifier=QUALIFIER_PROJECT,
        project_uuid=project_uuid,
        module_uuid=None,
        organization_uuid=organization.uuid,
    )
    db.add(component)
    db.commit()
    db.refresh(component)
    return component


@pytest.fixture(scope="function")
def module(db: Session, project: ComponentModel) -> ComponentModel:
    component = ComponentModel(
        uuid=str(uuid.uuid4()),
        kee="my-project:core",
        name="Core",
        scope=SCOPE_PROJECT,
        qualifier=QUALIFIER_MODULE,
        project_uuid=project.uuid,
        module_uuid=project.uuid,
        organization_uuid=project.organization_uuid,
    )
    db.add(component)
    db.commit()
    db.refresh(component)
    return component


@pytest.fixture(scope="function")
def associate(db: Session):
    """Associate a project with a quality profile."""

    def _associate(project: ComponentModel, profile: QualityProfileModel) -> None:
        db.add(ProjectQualityProfileModel(project_uuid=project.uuid, profile_key=profile.kee))
        db.commit()

    return _associate
