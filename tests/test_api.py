"""
Test suite for the HTTP API.
"""
import pytest

from langcolor.config import LANGUAGE_CATALOG


@pytest.fixture
def game_id(client, scheduler):
    """A game whose reveal phase has already ended."""
    response = client.post('/api/new_game')
    scheduler.advance(4)
    return response.get_json()['game_id']


def guess(client, game_id, language, color):
    return client.post(f'/api/game/{game_id}/guess', json={'language': language, 'color': color})


def test_health_endpoint(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 0


def test_new_game_shows_catalog(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['game_id']
    assert data['state']['reveal_phase'] is True
    assert len(data['state']['catalog']) == len(LANGUAGE_CATALOG)


def test_guess_during_reveal_rejected(client):
    game_id = client.post('/api/new_game').get_json()['game_id']

    response = guess(client, game_id, 'Go', '#00ADD8')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Languages are still being revealed'


def test_state_after_reveal(client, game_id):
    response = client.get(f'/api/game/{game_id}/state')
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['reveal_phase'] is False
    assert state['catalog'] is None


def test_state_unknown_game(client):
    response = client.get('/api/game/nope/state')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_successful_guess(client, game_id):
    response = guess(client, game_id, 'go', '#00add8')
    assert response.status_code == 200
    data = response.get_json()
    assert data['accepted'] is True
    assert data['attempt']['succeeded'] is True
    assert data['attempt']['sequence_number'] == 1
    assert data['state']['remaining_count'] == len(LANGUAGE_CATALOG) - 1


def test_repeat_guess_fails(client, game_id):
    guess(client, game_id, 'Go', '#00ADD8')
    data = guess(client, game_id, 'GO', '#000000').get_json()

    assert data['attempt']['succeeded'] is False


@pytest.mark.parametrize("body", [
    None, {}, {'language': 'Go'}, {'color': '#00ADD8'},
    ['language', 'color'], 'language color'
])
def test_guess_requires_both_fields(client, game_id, body):
    response = client.post(f'/api/game/{game_id}/guess', json=body)
    assert response.status_code == 400
    data = response.get_json()
    assert data['success'] is False
    assert data['error'] == 'Language and color are required'


def test_guess_on_game_expired_mid_request(client, game_id, game_service, monkeypatch):
    validate = game_service.is_valid_guess

    def validate_then_expire(gid, language, color):
        result = validate(gid, language, color)
        game_service.delete_game(gid)
        return result

    monkeypatch.setattr(game_service, 'is_valid_guess', validate_then_expire)
    response = guess(client, game_id, 'Go', '#00ADD8')

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Game not found'


def test_guess_with_non_string_rejected(client, game_id):
    response = guess(client, game_id, 7, '#00ADD8')
    assert response.status_code == 400


def test_guess_unknown_game(client):
    response = guess(client, 'nope', 'Go', '#00ADD8')
    assert response.status_code == 404


def test_game_over_then_ignored(client, game_id):
    for name in ['Cobol', 'Fortran', 'Ada', 'Pascal', 'Basic']:
        data = guess(client, game_id, name, '#000000').get_json()
    assert data['state']['game_over'] is True
    assert data['state']['won'] is False

    data = guess(client, game_id, 'Go', '#00ADD8').get_json()
    assert data['success'] is True
    assert data['accepted'] is False
    assert data['attempt'] is None
    assert data['state']['attempt_count'] == 5


def test_full_winning_game(client, game_id):
    for e in LANGUAGE_CATALOG[:20]:
        data = guess(client, game_id, e.name, e.color).get_json()

    assert data['state']['game_over'] is True
    assert data['state']['won'] is True
    assert data['state']['success_count'] == 20


def test_delete_game(client, game_id):
    assert client.delete(f'/api/game/{game_id}').get_json()['success'] is True
    assert client.get(f'/api/game/{game_id}/state').status_code == 404
    assert client.delete(f'/api/game/{game_id}').get_json()['success'] is False


def test_language_statistics_hide_colors(client):
    response = client.get('/api/languages')
    assert response.status_code == 200
    stats = response.get_json()['statistics']
    assert stats['total_languages'] == 23
    assert sum(stats['color_families'].values()) == 23
    assert '#' not in str(stats)
