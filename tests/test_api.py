"""
Tests for the JSON API endpoints and their response envelopes.
"""

from fretlog_app.core.signals import drill_scored, progression_viewed


def _practice(date, minutes, songs=(), techniques=()):
    return {'kind': 'practice', 'date': date, 'duration_minutes': minutes,
            'songs': list(songs), 'techniques': list(techniques)}


class TestHealth:

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['status'] == 'ok'
        assert {'caged', 'progression', 'dashboard', 'note_finder', 'shared'} <= set(data['modules'])


class TestCagedApi:

    def test_score_perfect_attempt(self, client):
        response = client.post('/api/caged/score', json={
            'shapes': ['C', 'A', 'G', 'E', 'D'], 'accuracy': 5, 'timeSeconds': 20,
        })
        assert response.status_code == 200
        body = response.get_json()
        assert body['success'] is True
        assert body['data']['score'] == 100
        assert body['data']['band'] == 'High'
        assert body['data']['accuracy_label'] == 'Perfect - No mistakes'
        assert body['data']['time_label'] == '20s'

    def test_score_partial_attempt(self, client):
        response = client.post('/api/caged/score', json={
            'shapes': ['C', 'A'], 'accuracy': 1, 'time_seconds': 40,
        })
        data = response.get_json()['data']
        assert data['score'] == 26
        assert data['band'] == 'Critical'
        assert data['breakdown']['shape_coverage'] == 0.4

    def test_accuracy_out_of_range(self, client):
        response = client.post('/api/caged/score', json={
            'shapes': ['C'], 'accuracy': 6, 'time_seconds': 20,
        })
        assert response.status_code == 400
        body = response.get_json()
        assert body['success'] is False
        assert body['code'] == 'VALIDATION_ERROR'
        assert 'accuracy' in body['details']['errors']

    def test_body_must_be_object(self, client):
        response = client.post('/api/caged/score', json=[1, 2, 3])
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Request body must be a JSON object'

    def test_score_sends_signal(self, app, client):
        received = []

        def receiver(sender, **kwargs):
            received.append(kwargs)

        with drill_scored.connected_to(receiver):
            client.post('/api/caged/score', json={'shapes': ['C'], 'accuracy': 3, 'time_seconds': 10})

        assert len(received) == 1
        assert received[0]['score'].value == 48
        assert received[0]['attempt'].shapes == ['C']

    def test_target_time_from_config(self, app, client):
        app.config['CAGED_TARGET_TIME_SECONDS'] = 40
        response = client.post('/api/caged/score', json={
            'shapes': ['C', 'A', 'G', 'E', 'D'], 'accuracy': 5, 'time_seconds': 40,
        })
        assert response.get_json()['data']['score'] == 100

    def test_labels(self, client):
        data = client.get('/api/caged/labels').get_json()['data']
        assert data['3'] == 'Good - Few mistakes'
        assert len(data) == 5

    def test_analytics(self, client):
        response = client.post('/api/caged/analytics', json={'sessions': [
            {'date': '2024-05-01', 'shapes': ['C', 'A'], 'score': 60, 'accuracy': 3, 'timeSeconds': 40},
            {'date': '2024-05-03T10:00:00Z', 'shapes': ['E'], 'score': 90, 'accuracy': 5, 'timeSeconds': 20},
        ]})
        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['stats']['avg_score'] == 75
        assert data['stats']['best_time_label'] == '20s'
        assert data['summary']['strongest_shape']['shape'] == 'E'
        assert data['summary']['strongest_shape']['last_practiced'] == '2024-05-03'


class TestProgressionApi:

    def test_summary_for_focus(self, client):
        response = client.post('/api/progression/summary', json={
            'focus': 'BLACKBIRD',
            'records': [
                _practice('2024-01-01', 60, songs=['Blackbird']),
                _practice('2024-01-02', 30, songs=['Wonderwall']),
                {'kind': 'drill', 'date': '2024-01-03', 'shapes': ['C'], 'score': 70},
            ],
        })
        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['total_sessions'] == 1
        assert data['total_minutes'] == 60
        assert data['total_practice'] == '1h 0m'
        assert data['sessions'][0]['songs'] == ['Blackbird']
        assert 'overall' not in data

    def test_records_without_kind_are_practice_sessions(self, client):
        response = client.post('/api/progression/summary', json={
            'focus': 'vibrato',
            'records': [{'sessionDate': '2024-02-01', 'durationMinutes': 25, 'techniques': ['Vibrato']}],
        })
        data = response.get_json()['data']
        assert data['total_minutes'] == 25
        assert data['sessions'][0]['kind'] == 'practice'

    def test_summary_without_focus(self, client):
        response = client.post('/api/progression/summary', json={
            'records': [_practice('2024-01-01', 60, songs=['Blackbird']),
                        _practice('2024-01-02', 30, songs=['Wonderwall'])],
        })
        data = response.get_json()['data']
        assert data['total_sessions'] == 0
        assert data['sessions'] == []
        assert data['overall'] == {'total_sessions': 2, 'total_minutes': 90}

    def test_summary_sends_signal(self, client):
        received = []

        def receiver(sender, **kwargs):
            received.append(kwargs)

        with progression_viewed.connected_to(receiver):
            client.post('/api/progression/summary', json={
                'focus': 'Blackbird',
                'records': [_practice('2024-01-01', 60, songs=['Blackbird'])],
            })

        assert received == [{'focus': 'Blackbird', 'total_sessions': 1, 'total_minutes': 60}]

    def test_invalid_record(self, client):
        response = client.post('/api/progression/summary', json={
            'focus': 'x', 'records': [{'kind': 'practice', 'date': 'not-a-date'}],
        })
        assert response.status_code == 400
        errors = response.get_json()['details']['errors']
        assert any(key.startswith('records.0') and key.endswith('date') for key in errors)

    def test_record_limit(self, client):
        records = [_practice('2024-01-01', 5, songs=['Blackbird'])] * 51
        response = client.post('/api/progression/summary', json={'focus': 'x', 'records': records})
        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {'records': 51}

    def test_record_limit_checked_before_validation(self, client):
        records = [{'kind': 'practice', 'date': 'not-a-date'}] * 51
        response = client.post('/api/progression/summary', json={'focus': 'x', 'records': records})
        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {'records': 51}

    def test_focus_options(self, client):
        response = client.post('/api/progression/focus-options', json={
            'repertoireTitles': ['Wonderwall', 'Blackbird'],
            'records': [_practice('2024-01-01', 10, techniques=['Vibrato', 'Blackbird'])],
        })
        assert response.get_json()['data']['options'] == ['Blackbird', 'Vibrato', 'Wonderwall']


class TestDashboardApi:

    def test_focus_suggestions(self, client):
        response = client.post('/api/dashboard/focus', json={
            'today': '2024-06-15',
            'goals': [{'title': 'Memorize the fretboard', 'status': 'Active', 'progress': 40}],
            'repertoire': [{'title': 'Blackbird', 'artist': 'The Beatles', 'lastPracticed': '2024-05-01'}],
            'records': [_practice('2024-06-12', 20, techniques=['Vibrato'])],
        })
        assert response.status_code == 200
        data = response.get_json()['data']
        assert [s['type'] for s in data['suggestions']] == ['goal', 'repertoire', 'technique']
        assert data['suggestions'][1]['title'] == 'Blackbird by The Beatles'
        assert data['totals'] == {'total_sessions': 1, 'total_minutes': 20}


class TestNoteFinderApi:

    def test_recommendations(self, client):
        attempts = [{'note': 'c', 'correct': True, 'timeSeconds': 1.2,
                     'createdAt': '2024-06-15T10:00:00'}] * 6
        response = client.post('/api/notes/recommendations?questions=8', json={
            'attempts': attempts, 'seed': 7,
        })
        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['recommendation']['difficulty_level'] == 'beginner'
        assert 'C' not in data['recommendation']['priority_notes']
        assert len(data['performance']) == 12
        assert len(data['quiz']) == 8

    def test_unknown_note_rejected(self, client):
        response = client.post('/api/notes/recommendations', json={
            'attempts': [{'note': 'H', 'correct': True, 'time_seconds': 1,
                          'created_at': '2024-06-15T10:00:00Z'}],
        })
        assert response.status_code == 400

    def test_question_count_out_of_range(self, client):
        response = client.post('/api/notes/recommendations?questions=0', json={'attempts': []})
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'

    def test_quiz_follows_recommendation_without_seed(self, client):
        # 10 attempts per note at 70% accuracy -> intermediate player
        attempts = []
        for note in ['A', 'A#', 'B', 'C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#']:
            for i in range(10):
                attempts.append({'note': note, 'correct': i < 7, 'time_seconds': 1.5,
                                 'created_at': '2024-06-15T10:00:00Z'})

        for _ in range(10):
            data = client.post('/api/notes/recommendations', json={'attempts': attempts}).get_json()['data']
            recommendation = data['recommendation']
            assert recommendation['difficulty_level'] == 'intermediate'
            modes = {q['mode'] for q in data['quiz']} - {'find-any'}
            assert modes <= {recommendation['recommended_mode']}

    def test_non_integer_query_argument(self, client):
        response = client.get('/api/notes/fretboard?frets=abc')
        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {'frets': 'abc'}

        response = client.post('/api/notes/recommendations?questions=many', json={'attempts': []})
        assert response.status_code == 400

    def test_fretboard(self, client):
        data = client.get('/api/notes/fretboard?frets=12').get_json()['data']
        assert data['tuning'] == ['E', 'B', 'G', 'D', 'A', 'E']
        assert len(data['strings']) == 6
        assert len(data['strings'][0]) == 13

    def test_positions(self, client):
        data = client.get('/api/notes/positions/e?frets=12').get_json()['data']
        assert data['note'] == 'E'
        assert len(data['positions']) == 8
        assert {'string': 2, 'fret': 5} in data['positions']

    def test_positions_encoded_sharp(self, client):
        data = client.get('/api/notes/positions/F%23?frets=2').get_json()['data']
        assert data['positions'] == [{'string': 1, 'fret': 2}, {'string': 6, 'fret': 2}]

    def test_positions_unknown_note(self, client):
        assert client.get('/api/notes/positions/H').status_code == 400


class TestErrorEnvelopes:

    def test_unknown_api_route(self, client):
        response = client.get('/api/nope')
        assert response.status_code == 404
        body = response.get_json()
        assert body['success'] is False
        assert body['code'] == 'NOT_FOUND'

    def test_wrong_method(self, client):
        response = client.get('/api/caged/score')
        assert response.status_code == 405
        assert response.get_json()['code'] == 'METHOD_NOT_ALLOWED'
