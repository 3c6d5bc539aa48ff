import pytest

from models import parse_artccs


SAMPLE_ARTCCS = [
    {
        'id': 'ZOA',
        'facility': {
            'id': 'ZOA',
            'name': 'Oakland Center',
            'childFacilities': [
                {
                    'id': 'NCT',
                    'name': 'NorCal TRACON',
                    'childFacilities': [
                        {
                            'id': 'SFO',
                            'name': 'San Francisco Tower',
                            'childFacilities': [],
                            'positions': [
                                {'id': 'SFO_TWR', 'name': 'SFO Tower', 'transceiverIds': ['T3']},
                            ],
                        },
                    ],
                    'positions': [
                        {'id': 'NCT_APP', 'name': 'NorCal Approach', 'transceiverIds': ['T2', 'T3']},
                        {'id': 'NCT_DEP', 'name': 'NorCal Departure', 'transceiverIds': ['T3']},
                    ],
                },
            ],
            'positions': [
                {'id': 'OAK_CTR', 'name': 'Oakland Center', 'transceiverIds': ['T1', 'T2']},
                {'id': 'OAK_41', 'name': 'Oakland 41', 'transceiverIds': ['T1']},
            ],
        },
        'transceivers': [
            {'id': 'T1', 'name': 'Mt Tamalpais', 'location': {'lat': 37.92, 'lon': -122.59},
             'heightMslMeters': 784.0, 'heightAglMeters': 20.0},
            {'id': 'T2', 'name': 'Mt Diablo', 'location': {'lat': 37.88, 'lon': -121.91},
             'heightMslMeters': 1173.0, 'heightAglMeters': 15.0},
            {'id': 'T3', 'name': 'SFO Field', 'location': {'lat': 37.62, 'lon': -122.38},
             'heightMslMeters': 100.0, 'heightAglMeters': 10.0},
            {'id': 'T4', 'name': 'Unused Site', 'location': {'lat': 38.0, 'lon': -121.0},
             'heightMslMeters': 50.0, 'heightAglMeters': 5.0},
        ],
    },
    {
        'id': 'ZLA',
        'facility': {'id': 'ZLA', 'name': 'Los Angeles Center', 'childFacilities': [], 'positions': []},
        'transceivers': [],
    },
]


@pytest.fixture
def artcc_payload():
    return [dict(a) for a in SAMPLE_ARTCCS]


@pytest.fixture
def artccs():
    return parse_artccs(SAMPLE_ARTCCS)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._payload


@pytest.fixture
def fake_upstream(monkeypatch):
    """Replace requests.get with a canned response; returns the list of requested URLs."""
    calls = []

    def install(status_code=200, payload=None, json_error=None, exc=None):
        response = FakeResponse(status_code, payload, json_error)

        def fake_get(url, *args, **kwargs):
            calls.append(url)
            if exc is not None:
                raise exc
            return response

        monkeypatch.setattr('artcc_client.requests.get', fake_get)
        return calls

    return install
