"""
Shared fixtures: in-memory database, API client and sample data
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import hrportal.models  # noqa: F401
from hrportal.auth.service import create_access_token, get_password_hash
from hrportal.core.database import Base, get_db
from hrportal.main import app
from hrportal.users.repository import UserRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_candidates():
    """Mixed-shape candidate payloads as the API receives them"""
    return [
        {
            "name": "Asha Rao",
            "email": "asha@example.com",
            "mobile": "9845011111",
            "location": "Bangalore, India",
            "visaStatus": "Not Required",
            "experience": "6 years",
            "skills": ["Python", "IoT", "Embedded Systems"],
            "salary": "₹18 LPA",
        },
        {
            "name": "Rahul Mehta",
            "email": "rahul@example.com",
            "mobile": "9820022222",
            "location": "Pune, India",
            "visaStatus": "H1B",
            "experience": "3 years",
            "skills": "python, Django",
            "status": "Interviewing",
            "salary": "₹12 LPA",
        },
        {
            "name": "Meera Iyer",
            "email": "meera@example.com",
            "mobile": "9900033333",
            "location": "Bangalore North, India",
            "visaStatus": "Not Required",
            "experience": "11 years",
            "skills": ["Java", "iot"],
            "salary": "₹35 LPA",
        },
        {
            "name": "Karthik S",
            "email": "karthik@example.com",
            "mobile": "9444044444",
            "visaStatus": "L1",
            "experience": "fresher",
            "skills": '["JAVA", "PCB Design"]',
            "status": "Not Available",
        },
    ]


@pytest.fixture
def seeded_client(client, sample_candidates):
    for payload in sample_candidates:
        response = client.post("/api/candidates/", json=payload)
        assert response.status_code == 201, response.text
    return client


@pytest.fixture
def admin_headers(db_session):
    UserRepository(db_session).create("root", get_password_hash("s3cret-pass"), "Admin")
    token = create_access_token({"sub": "root", "role": "Admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def hr_headers(db_session):
    UserRepository(db_session).create("recruiter", get_password_hash("hr-pass-123"), "HR")
    token = create_access_token({"sub": "recruiter", "role": "HR"})
    return {"Authorization": f"Bearer {token}"}
