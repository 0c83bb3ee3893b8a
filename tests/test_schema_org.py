"""
Tests for the Schema.org ProfilePage document
"""

import json

import pytest

from models import LocaleBundle
from utils.schema_org import KNOWS_ABOUT, generate_schema_org_data, render_schema_org_json


@pytest.fixture
def bundle():
    return LocaleBundle(
        locale='en',
        profile={
            'name': 'Ada Lovelace',
            'title': 'Analyst',
            'contact': {
                'email': 'ada@example.com',
                'phone': '+44 0000',
                'linkedin': 'https://linkedin.com/in/ada',
                'github': 'https://github.com/ada',
            },
        },
        skills={},
        experience={},
        education={'degrees': [{'course': 'Mathematics'}, {'course': 'Engineering'}]},
        ui={},
    )


def test_person_fields(bundle):
    data = generate_schema_org_data(bundle, 'https://ada.example.com')
    assert data['@context'] == 'https://schema.org'
    assert data['@type'] == 'ProfilePage'

    person = data['mainEntity']
    assert person['@type'] == 'Person'
    assert person['name'] == 'Ada Lovelace'
    assert person['jobTitle'] == 'Analyst'
    assert person['email'] == 'ada@example.com'
    assert person['telephone'] == '+44 0000'
    assert person['url'] == 'https://ada.example.com'
    assert person['sameAs'] == ['https://linkedin.com/in/ada', 'https://github.com/ada']
    assert person['knowsAbout'] == KNOWS_ABOUT


def test_one_credential_per_degree(bundle):
    credentials = generate_schema_org_data(bundle, '')['mainEntity']['hasCredential']
    assert [c['name'] for c in credentials] == ['Mathematics', 'Engineering']
    assert all(c['credentialCategory'] == 'degree' for c in credentials)


def test_rendered_json_cannot_close_script_tag(bundle):
    hostile = bundle.model_copy(update={
        'profile': bundle.profile.model_copy(update={'name': '</script><b>'})
    })
    payload = render_schema_org_json(hostile, '')
    assert '</script>' not in payload
    assert json.loads(payload)['mainEntity']['name'] == '</script><b>'
