"""
Unit Tests for Admin API Endpoints
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient

from complaintbox.core.security import create_employee_token
from complaintbox.models import ApprovalStatus
from complaintbox.services.complaint_service import ComplaintService


ADMIN_ROUTES = [
    ('GET', '/api/v1/admin/users'),
    ('GET', '/api/v1/admin/users/pending'),
    ('PATCH', '/api/v1/admin/users/some-id/approval'),
    ('DELETE', '/api/v1/admin/users/some-id'),
    ('GET', '/api/v1/admin/complaints'),
    ('PATCH', '/api/v1/admin/complaints/some-id/status'),
    ('PATCH', '/api/v1/admin/complaints/some-id/reply'),
    ('DELETE', '/api/v1/admin/complaints/some-id'),
]


class TestAdminGate:

    @pytest.mark.asyncio
    @pytest.mark.parametrize('method,path', ADMIN_ROUTES)
    async def test_requires_token(self, client: AsyncClient, method, path):
        response = await client.request(method, path, json={})

        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize('method,path', ADMIN_ROUTES)
    async def test_employee_token_forbidden(self, client: AsyncClient, auth_headers, method, path):
        response = await client.request(method, path, headers=auth_headers, json={})

        assert response.status_code == 403
        assert response.json()['message'] == 'Admin access required'


class TestAdminUsers:

    @pytest.mark.asyncio
    async def test_list_users_hides_hashes(self, client: AsyncClient, admin_auth_headers, make_employee):
        await make_employee()
        await make_employee(approval_status=ApprovalStatus.PENDING)

        response = await client.get('/api/v1/admin/users', headers=admin_auth_headers)

        assert response.status_code == 200
        users = response.json()['users']
        assert len(users) == 2
        assert all('hashed_password' not in u for u in users)

    @pytest.mark.asyncio
    async def test_list_pending(self, client: AsyncClient, admin_auth_headers, make_employee, pending_employee):
        await make_employee()

        response = await client.get('/api/v1/admin/users/pending', headers=admin_auth_headers)

        assert [u['id'] for u in response.json()['users']] == [pending_employee.id]

    @pytest.mark.asyncio
    async def test_approve(self, client: AsyncClient, admin_auth_headers, pending_employee):
        response = await client.patch(
            f'/api/v1/admin/users/{pending_employee.id}/approval',
            headers=admin_auth_headers,
            json={'approval_status': 'approved'},
        )

        assert response.status_code == 200
        assert response.json()['user']['approval_status'] == 'approved'

    @pytest.mark.asyncio
    async def test_invalid_approval_value(self, client: AsyncClient, admin_auth_headers, pending_employee):
        response = await client.patch(
            f'/api/v1/admin/users/{pending_employee.id}/approval',
            headers=admin_auth_headers,
            json={'approval_status': 'maybe'},
        )

        assert response.status_code == 400
        assert response.json()['code'] == 'INVALID_STATUS'

    @pytest.mark.asyncio
    async def test_approval_unknown_user(self, client: AsyncClient, admin_auth_headers):
        response = await client.patch(
            '/api/v1/admin/users/missing-id/approval',
            headers=admin_auth_headers,
            json={'approval_status': 'approved'},
        )

        assert response.status_code == 404
        assert response.json()['message'] == 'User not found'

    @pytest.mark.asyncio
    async def test_rejection_applies_to_live_token(self, client: AsyncClient, admin_auth_headers, approved_employee):
        token = create_employee_token(approved_employee.id, approved_employee.email)
        headers = {'Authorization': f'Bearer {token}'}
        assert (await client.get('/api/v1/auth/me', headers=headers)).status_code == 200

        await client.patch(
            f'/api/v1/admin/users/{approved_employee.id}/approval',
            headers=admin_auth_headers,
            json={'approval_status': 'rejected'},
        )

        response = await client.get('/api/v1/auth/me', headers=headers)
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_delete_user_cascades(self, client: AsyncClient, db_session, admin_auth_headers, make_employee):
        doomed = await make_employee()
        other = await make_employee()
        service = ComplaintService(db_session)
        await service.create(doomed, 'PF', None, 'one')
        await service.create(other, 'PF', None, 'two')

        response = await client.delete(f'/api/v1/admin/users/{doomed.id}', headers=admin_auth_headers)

        assert response.status_code == 200
        assert response.json()['message'] == 'User and associated complaints deleted successfully'

        complaints = (await client.get('/api/v1/admin/complaints', headers=admin_auth_headers)).json()['complaints']
        assert [c['employee_id'] for c in complaints] == [other.id]

        token = create_employee_token(doomed.id, doomed.email)
        me = await client.get('/api/v1/auth/me', headers={'Authorization': f'Bearer {token}'})
        assert me.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, client: AsyncClient, admin_auth_headers):
        response = await client.delete('/api/v1/admin/users/missing-id', headers=admin_auth_headers)

        assert response.status_code == 404


class TestAdminComplaints:

    @pytest_asyncio.fixture
    async def complaint(self, db_session, approved_employee):
        return await ComplaintService(db_session).create(approved_employee, 'PF', 'low', 'PF not credited')

    @pytest.mark.asyncio
    async def test_update_status(self, client: AsyncClient, admin_auth_headers, complaint):
        for target in ['received', 'resolved', 'pending']:
            response = await client.patch(
                f'/api/v1/admin/complaints/{complaint.id}/status',
                headers=admin_auth_headers,
                json={'status': target},
            )
            assert response.status_code == 200
            assert response.json()['complaint']['status'] == target

    @pytest.mark.asyncio
    async def test_invalid_status(self, client: AsyncClient, admin_auth_headers, complaint):
        response = await client.patch(
            f'/api/v1/admin/complaints/{complaint.id}/status',
            headers=admin_auth_headers,
            json={'status': 'closed'},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_status_unknown_complaint(self, client: AsyncClient, admin_auth_headers):
        response = await client.patch(
            '/api/v1/admin/complaints/missing-id/status',
            headers=admin_auth_headers,
            json={'status': 'received'},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_reply(self, client: AsyncClient, admin_auth_headers, complaint, auth_headers):
        response = await client.patch(
            f'/api/v1/admin/complaints/{complaint.id}/reply',
            headers=admin_auth_headers,
            json={'admin_reply': 'Forwarded to payroll'},
        )

        assert response.status_code == 200
        assert response.json()['complaint']['admin_reply'] == 'Forwarded to payroll'

        mine = await client.get('/api/v1/complaints/mine', headers=auth_headers)
        assert mine.json()['complaints'][0]['admin_reply'] == 'Forwarded to payroll'

    @pytest.mark.asyncio
    async def test_delete_complaint(self, client: AsyncClient, admin_auth_headers, complaint):
        response = await client.delete(f'/api/v1/admin/complaints/{complaint.id}', headers=admin_auth_headers)

        assert response.status_code == 200
        assert response.json() == {'success': True, 'message': 'Complaint deleted successfully'}

        again = await client.delete(f'/api/v1/admin/complaints/{complaint.id}', headers=admin_auth_headers)
        assert again.status_code == 404
