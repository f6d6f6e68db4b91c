"""
Unit Tests for Authentication API Endpoints
"""
import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient
from faker import Faker

from complaintbox.core.config import settings
from complaintbox.core.security import create_employee_token, create_admin_token
from complaintbox.models import ApprovalStatus

fake = Faker()


class TestEmployeeRegistration:
    """Test employee registration endpoint"""

    @pytest.mark.asyncio
    async def test_register_success(self, client: AsyncClient, registration_data):
        response = await client.post('/api/v1/auth/register', json=registration_data)

        assert response.status_code == 201
        data = response.json()
        assert data['success'] is True
        assert data['message'] == 'Registration successful! Wait for admin approval.'
        assert data['user']['employee_number'] == registration_data['employee_number']
        assert data['user']['approval_status'] == 'pending'
        assert data['user']['role'] == 'employee'
        assert 'hashed_password' not in data['user']
        assert 'password' not in data['user']

    @pytest.mark.asyncio
    async def test_register_ignores_client_supplied_role(self, client: AsyncClient, registration_data):
        registration_data['role'] = 'admin'
        registration_data['approval_status'] = 'approved'

        response = await client.post('/api/v1/auth/register', json=registration_data)

        assert response.status_code == 201
        assert response.json()['user']['role'] == 'employee'
        assert response.json()['user']['approval_status'] == 'pending'

    @pytest.mark.asyncio
    async def test_register_duplicate_number(self, client: AsyncClient, approved_employee, registration_data):
        registration_data['employee_number'] = approved_employee.employee_number

        response = await client.post('/api/v1/auth/register', json=registration_data)

        assert response.status_code == 400
        assert response.json() == {
            'success': False,
            'message': 'Phone number already registered',
            'code': 'DUPLICATE_IDENTITY',
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize('number', ['12345', '12345678901', 'abcdefghij'])
    async def test_register_invalid_number(self, client: AsyncClient, registration_data, number):
        registration_data['employee_number'] = number

        response = await client.post('/api/v1/auth/register', json=registration_data)

        assert response.status_code == 400
        assert response.json()['success'] is False
        assert response.json()['message'] == 'Phone number must be exactly 10 digits'

    @pytest.mark.asyncio
    async def test_register_short_password(self, client: AsyncClient, registration_data):
        registration_data['password'] = '12345'

        response = await client.post('/api/v1/auth/register', json=registration_data)

        assert response.status_code == 400
        assert response.json()['message'] == 'Password must be at least 6 characters'

    @pytest.mark.asyncio
    async def test_register_missing_field(self, client: AsyncClient, registration_data):
        del registration_data['department']

        response = await client.post('/api/v1/auth/register', json=registration_data)

        assert response.status_code == 400
        assert response.json()['success'] is False


class TestEmployeeLogin:
    """Test employee login endpoint"""

    @pytest.mark.asyncio
    async def test_login_approved(self, client: AsyncClient, approved_employee):
        response = await client.post('/api/v1/auth/login', json={
            'employee_number': approved_employee.employee_number,
            'password': 'testpassword123',
        })

        assert response.status_code == 200
        data = response.json()
        assert data['success'] is True
        assert data['token']
        assert data['user']['id'] == approved_employee.id

    @pytest.mark.asyncio
    async def test_login_pending(self, client: AsyncClient, pending_employee):
        response = await client.post('/api/v1/auth/login', json={
            'employee_number': pending_employee.employee_number,
            'password': 'testpassword123',
        })

        assert response.status_code == 403
        assert response.json()['message'] == 'Account pending approval'
        assert 'token' not in response.json()

    @pytest.mark.asyncio
    async def test_login_rejected(self, client: AsyncClient, make_employee):
        employee = await make_employee(approval_status=ApprovalStatus.REJECTED)

        response = await client.post('/api/v1/auth/login', json={
            'employee_number': employee.employee_number,
            'password': 'testpassword123',
        })

        assert response.status_code == 403
        assert response.json()['message'] == 'Account rejected. Contact HR.'

    @pytest.mark.asyncio
    async def test_unknown_and_wrong_password_identical(self, client: AsyncClient, approved_employee):
        unknown = await client.post('/api/v1/auth/login', json={
            'employee_number': '0000000000',
            'password': 'testpassword123',
        })
        wrong = await client.post('/api/v1/auth/login', json={
            'employee_number': approved_employee.employee_number,
            'password': 'not-the-password',
        })

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()
        assert unknown.json()['message'] == 'Invalid credentials'


class TestAdminLogin:

    @pytest.mark.asyncio
    async def test_admin_login_success(self, client: AsyncClient):
        response = await client.post('/api/v1/auth/admin/login', json={
            'username': settings.ADMIN_USERNAME,
            'password': settings.ADMIN_PASSWORD,
        })

        assert response.status_code == 200
        data = response.json()
        assert data['token']
        assert data['user'] == {'username': settings.ADMIN_USERNAME, 'role': 'admin'}

    @pytest.mark.asyncio
    async def test_admin_login_wrong_password(self, client: AsyncClient):
        response = await client.post('/api/v1/auth/admin/login', json={
            'username': settings.ADMIN_USERNAME,
            'password': 'wrong',
        })

        assert response.status_code == 401
        assert response.json()['message'] == 'Invalid admin credentials'

    @pytest.mark.asyncio
    async def test_employee_credentials_do_not_work_for_admin(self, client: AsyncClient, approved_employee):
        response = await client.post('/api/v1/auth/admin/login', json={
            'username': approved_employee.employee_number,
            'password': 'testpassword123',
        })

        assert response.status_code == 401


class TestEmployeeGate:
    """Gate behavior exercised through GET /auth/me"""

    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, approved_employee, auth_headers):
        response = await client.get('/api/v1/auth/me', headers=auth_headers)

        assert response.status_code == 200
        assert response.json()['user']['id'] == approved_employee.id

    @pytest.mark.asyncio
    async def test_missing_header(self, client: AsyncClient):
        response = await client.get('/api/v1/auth/me')

        assert response.status_code == 401
        assert response.json()['success'] is False

    @pytest.mark.asyncio
    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get('/api/v1/auth/me', headers={'Authorization': 'Bearer garbage'})

        assert response.status_code == 401
        assert response.json()['message'] == 'Invalid or expired token'

    @pytest.mark.asyncio
    async def test_expired_token(self, client: AsyncClient, approved_employee):
        issued = datetime.now(timezone.utc) - timedelta(days=8)
        token = create_employee_token(approved_employee.id, approved_employee.email, now=issued)

        response = await client.get('/api/v1/auth/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_for_deleted_account(self, client: AsyncClient):
        token = create_employee_token('no-such-account', 'ghost@example.com')

        response = await client.get('/api/v1/auth/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401
        assert response.json()['message'] == 'User not found'

    @pytest.mark.asyncio
    async def test_admin_token_rejected(self, client: AsyncClient):
        token = create_admin_token()

        response = await client.get('/api/v1/auth/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_pending_account_with_token(self, client: AsyncClient, pending_employee):
        token = create_employee_token(pending_employee.id, pending_employee.email)

        response = await client.get('/api/v1/auth/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 403
