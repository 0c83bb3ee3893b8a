"""
Shared fixtures: Flask apps built against temporary content and public directories
"""

import os
import shutil

import pytest

from app import create_app
from config import BASE_DIR

REPO_DATA_DIR = os.path.join(BASE_DIR, 'data')


def _make_public_dir(root):
    public_dir = root / 'public'
    (public_dir / 'css').mkdir(parents=True)
    (public_dir / 'css' / 'main.css').write_text('body { color: black; }', encoding='utf-8')
    (public_dir / 'app.js').write_text('console.log("hi");', encoding='utf-8')
    (public_dir / 'logo.PNG').write_bytes(b'\x89PNG\r\n\x1a\n')
    (public_dir / 'font.woff2').write_bytes(b'wOF2')
    (public_dir / 'archive.xyz').write_bytes(b'\x00\x01')
    (public_dir / 'LICENSE').write_text('MIT', encoding='utf-8')
    return public_dir


def _build_app(tmp_path, data_dir, with_cname=True):
    cname_path = tmp_path / 'CNAME'
    if with_cname:
        cname_path.write_text('example.com\n', encoding='utf-8')

    (tmp_path / 'secret.txt').write_text('do not serve', encoding='utf-8')

    return create_app('testing', overrides={
        'DATA_DIR': str(data_dir),
        'PUBLIC_DIR': str(_make_public_dir(tmp_path)),
        'CNAME_PATH': str(cname_path),
        'SITE_URL': 'https://example.com',
    })


@pytest.fixture
def data_dir(tmp_path):
    """Copy of the shipped locale content, safe to modify per test"""
    target = tmp_path / 'data'
    shutil.copytree(REPO_DATA_DIR, target)
    return target


@pytest.fixture
def app(tmp_path, data_dir):
    return _build_app(tmp_path, data_dir)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def degraded_app(tmp_path, data_dir):
    """App whose pt-BR content is missing and whose en profile is malformed"""
    shutil.rmtree(data_dir / 'pt-BR')
    (data_dir / 'en' / 'profile.yaml').write_text('- not\n- a\n- mapping\n', encoding='utf-8')
    return _build_app(tmp_path, data_dir, with_cname=False)


@pytest.fixture
def degraded_client(degraded_app):
    return degraded_app.test_client()
