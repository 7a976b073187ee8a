def test_list_banners_is_public(client) -> None:
    response = client.get('/banner')

    assert response.status_code == 200
    assert response.json() == []


def test_create_banner_requires_admin(client, user_headers) -> None:
    response = client.post('/banner', json={'title': 'Sale'}, headers=user_headers)

    assert response.status_code == 401


def test_admin_creates_and_updates_banner(client, admin_headers) -> None:
    created = client.post('/banner', json={'title': 'Sale', 'status': 'inactive'}, headers=admin_headers)
    banner_id = created.json()['insertedId']

    updated = client.patch(f'/bannerUpdate/{banner_id}', json={'status': 'active'}, headers=admin_headers)

    assert created.status_code == 201
    assert updated.status_code == 200
    assert updated.json()['matchedCount'] == 1
    assert client.get('/banner').json() == [{'_id': banner_id, 'title': 'Sale', 'status': 'active'}]


def test_update_missing_banner_returns_404(client, admin_headers) -> None:
    response = client.patch(f'/bannerUpdate/{"e" * 24}', json={'status': 'active'}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {'detail': 'Banner not found'}
