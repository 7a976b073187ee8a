import pytest
from sqlalchemy.exc import OperationalError

from diagnocare.repositories.content_repo import BannerRepository


def test_root_reports_liveness(client) -> None:
    response = client.get('/')

    assert response.status_code == 200
    assert response.text == 'DiagnoCare Server is running'


def test_database_errors_become_503(client, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_list_all(self):
        raise OperationalError('SELECT 1', {}, Exception('connection refused'))

    monkeypatch.setattr(BannerRepository, 'list_all', broken_list_all)

    response = client.get('/banner')

    assert response.status_code == 503
    assert response.json() == {'detail': 'Database unavailable. Verify DATABASE_URL and database credentials.'}
