"""
Unit Tests for Livelihood and Workshop API Endpoints
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from me_portal.models import Livelihood, Workshop

HTML = {'Accept': 'text/html'}


def livelihood_form(project_id: int, **overrides) -> dict:
    form = {
        'projectId': str(project_id),
        'participantName': 'Amina Yusuf',
        'location': 'Garissa',
        'disaggregatedSex': 'FEMALE',
        'disability': 'false',
        'ageGroup': 'GROUP_30_44',
        'grantAmountReceived': '250.50',
        'purpose': 'Poultry',
        'progress1': 'Bought 20 chicks',
        'progress2': 'Selling eggs weekly',
        'outcome': 'Steady income',
        'subsequentGrantAmount': '0',
    }
    form.update(overrides)
    return form


def workshop_form(project_id: int, **overrides) -> dict:
    form = {
        'projectId': str(project_id),
        'numParticipants': '25',
        'disaggregatedSex': 'MALE',
        'disability': 'true',
        'ageGroup': 'GROUP_65_PLUS',
        'preEvaluation': 'Low awareness',
        'postEvaluation': 'Good awareness',
        'localPartner': 'Community Health Network',
        'localPartnerResponsibility': 'Venue and mobilisation',
        'successOfPartnership': 'Strong',
        'challenges': 'Transport',
        'strengths': 'Local trust',
        'outcomes': 'Two follow-up groups formed',
        'recommendations': 'Repeat in the dry season',
    }
    form.update(overrides)
    return form


class TestLivelihood:
    """Test GET/POST /livelihood"""

    @pytest.mark.asyncio
    async def test_unauthenticated_redirects(self, client: AsyncClient):
        response = await client.get('/livelihood')

        assert response.status_code == 302
        assert response.headers['location'] == '/login?redirectTo=%2Flivelihood'

    @pytest.mark.asyncio
    async def test_admin_creates_and_lists(self, admin_client: AsyncClient, project):
        response = await admin_client.post('/livelihood', data=livelihood_form(project.id))

        assert response.status_code == 200
        created = response.json()
        assert created['participantName'] == 'Amina Yusuf'
        assert created['disability'] is False
        assert created['ageGroup'] == 'GROUP_30_44'
        assert created['grantAmountReceived'] == 250.5

        listing = (await admin_client.get('/livelihood')).json()
        [item] = listing['livelihoods']
        assert item['project'] == {'id': project.id, 'name': project.name}
        assert [p['id'] for p in listing['projects']] == [project.id]

    @pytest.mark.asyncio
    async def test_html_list_shows_age_label(self, admin_client: AsyncClient, project):
        await admin_client.post('/livelihood', data=livelihood_form(project.id))
        response = await admin_client.get('/livelihood', headers=HTML)

        assert '<td>30-44</td>' in response.text
        assert '250.50' in response.text

    @pytest.mark.asyncio
    async def test_validation_errors(self, admin_client: AsyncClient, project):
        response = await admin_client.post(
            '/livelihood', data=livelihood_form(project.id, ageGroup='30-44', grantAmountReceived='-1')
        )

        assert response.status_code == 400
        paths = [error['path'] for error in response.json()['errors']]
        assert paths == [['ageGroup'], ['grantAmountReceived']]

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self, staff_client: AsyncClient, project, db_session: AsyncSession):
        response = await staff_client.post('/livelihood', data=livelihood_form(project.id))

        assert response.status_code == 403
        assert await db_session.scalar(select(func.count()).select_from(Livelihood)) == 0


class TestWorkshop:
    """Test GET/POST /workshop"""

    @pytest.mark.asyncio
    async def test_unauthenticated_redirects(self, client: AsyncClient):
        response = await client.get('/workshop')

        assert response.status_code == 302
        assert response.headers['location'] == '/login?redirectTo=%2Fworkshop'

    @pytest.mark.asyncio
    async def test_admin_creates_and_lists(self, admin_client: AsyncClient, project):
        response = await admin_client.post('/workshop', data=workshop_form(project.id))

        assert response.status_code == 200
        created = response.json()
        assert created['numParticipants'] == 25
        assert created['disability'] is True
        assert created['localPartner'] == 'Community Health Network'

        listing = (await admin_client.get('/workshop')).json()
        assert listing['workshops'][0]['project']['id'] == project.id

    @pytest.mark.asyncio
    async def test_negative_participants(self, admin_client: AsyncClient, project):
        response = await admin_client.post('/workshop', data=workshop_form(project.id, numParticipants='-3'))

        assert response.status_code == 400
        assert response.json()['errors'] == [
            {'path': ['numParticipants'], 'message': 'Number of participants must be non-negative'}
        ]

    @pytest.mark.asyncio
    async def test_html_success_redirects(self, admin_client: AsyncClient, project):
        response = await admin_client.post('/workshop', data=workshop_form(project.id), headers=HTML)

        assert response.status_code == 303
        assert response.headers['location'] == '/workshop'

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self, staff_client: AsyncClient, project, db_session: AsyncSession):
        response = await staff_client.post('/workshop', data=workshop_form(project.id))

        assert response.status_code == 403
        assert await db_session.scalar(select(func.count()).select_from(Workshop)) == 0
