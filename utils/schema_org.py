"""
Schema.org Module - JSON-LD profile metadata for search engines
"""

import json

SCHEMA_ORG_ELEMENT_ID = 'schema-org-data'

KNOWS_ABOUT = [
    'PHP',
    'Laravel',
    'Django',
    'Python',
    'Docker',
    'REST API',
    'MySQL',
    'PostgreSQL',
    'Git',
    'Linux',
    'React',
    'JavaScript',
    'TypeScript',
    'Tailwind CSS',
    'Microservices',
]


def generate_schema_org_data(bundle, site_url):
    """
    Project a locale bundle's profile and education into a ProfilePage document

    Args:
        bundle (LocaleBundle): Active locale content
        site_url (str): Canonical site URL

    Returns:
        dict: Schema.org ProfilePage with a Person main entity
    """
    profile = bundle.profile
    contact = profile.contact

    return {
        '@context': 'https://schema.org',
        '@type': 'ProfilePage',
        'mainEntity': {
            '@type': 'Person',
            'name': profile.name,
            'jobTitle': profile.title,
            'email': contact.email,
            'telephone': contact.phone,
            'url': site_url,
            'sameAs': [contact.linkedin, contact.github],
            'knowsAbout': list(KNOWS_ABOUT),
            'hasCredential': [
                {
                    '@type': 'EducationalOccupationalCredential',
                    'name': degree.course,
                    'credentialCategory': 'degree',
                }
                for degree in bundle.education.degrees
            ],
        },
    }


def render_schema_org_json(bundle, site_url):
    """Serialize the metadata document for a <script type="application/ld+json"> tag"""
    payload = json.dumps(generate_schema_org_data(bundle, site_url), ensure_ascii=False)
    # Must not close the surrounding script element
    return payload.replace('</', '<\\/')
