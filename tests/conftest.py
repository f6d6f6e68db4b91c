"""
ComplaintBox - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator, Callable, Dict
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from faker import Faker

# Set testing environment before the app reads its settings
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DEBUG'] = 'false'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test.db'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing-only-0123456789'
os.environ['ADMIN_USERNAME'] = 'admin'
os.environ['ADMIN_PASSWORD'] = 'admin-test-password'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['LOG_FILE'] = ''
os.environ['LOG_LEVEL'] = 'WARNING'
os.environ['MAX_REQUEST_SIZE'] = str(1024 * 1024)

from complaintbox.main import app
from complaintbox.core.database import Base, get_db
from complaintbox.core.security import get_password_hash, create_employee_token, create_admin_token
from complaintbox.models import Employee, EmployeeRole, ApprovalStatus

fake = Faker()

TEST_PASSWORD = 'testpassword123'


def fake_phone() -> str:
    """Random 10-digit employee number"""
    return fake.numerify('##########')


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh SQLite database per test"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def server_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Client that receives 500 responses the way a real server would send them"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_employee(db_session: AsyncSession) -> Callable:
    """Factory inserting an employee account directly"""
    async def _make(
        approval_status: ApprovalStatus = ApprovalStatus.APPROVED,
        password: str = TEST_PASSWORD,
        **overrides
    ) -> Employee:
        employee = Employee(
            name=overrides.get('name', fake.name()),
            employee_number=overrides.get('employee_number', fake_phone()),
            email=overrides.get('email', fake.unique.email()),
            hashed_password=get_password_hash(password),
            department=overrides.get('department', 'Operations'),
            work_location=overrides.get('work_location', fake.city()),
            role=EmployeeRole.EMPLOYEE,
            approval_status=approval_status,
        )
        db_session.add(employee)
        await db_session.commit()
        await db_session.refresh(employee)
        return employee

    return _make


@pytest_asyncio.fixture
async def approved_employee(make_employee) -> Employee:
    return await make_employee()


@pytest_asyncio.fixture
async def pending_employee(make_employee) -> Employee:
    return await make_employee(approval_status=ApprovalStatus.PENDING)


def bearer(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def auth_headers(approved_employee: Employee) -> dict:
    """Authentication headers for an approved employee"""
    return bearer(create_employee_token(approved_employee.id, approved_employee.email))


@pytest.fixture
def admin_auth_headers() -> dict:
    """Authentication headers for the configured admin"""
    return bearer(create_admin_token())


@pytest.fixture
def registration_data() -> dict:
    return {
        'name': fake.name(),
        'employee_number': fake_phone(),
        'password': 'secret123',
        'department': 'Finance',
        'work_location': fake.city(),
    }
