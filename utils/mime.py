"""
Content-type lookup for files served from the public directory
"""

import os

DEFAULT_CONTENT_TYPE = 'application/octet-stream'

CONTENT_TYPES = {
    '.html': 'text/html',
    '.css': 'text/css',
    '.js': 'text/javascript',
    '.mjs': 'text/javascript',
    '.json': 'application/json',
    '.webmanifest': 'application/manifest+json',
    '.xml': 'application/xml',
    '.txt': 'text/plain',
    '.svg': 'image/svg+xml',
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.gif': 'image/gif',
    '.webp': 'image/webp',
    '.ico': 'image/x-icon',
    '.pdf': 'application/pdf',
    '.woff': 'font/woff',
    '.woff2': 'font/woff2',
    '.ttf': 'font/ttf',
}


def content_type_for(filename):
    """Resolve a content type from the file extension, case-insensitively"""
    _, ext = os.path.splitext(filename)
    return CONTENT_TYPES.get(ext.lower(), DEFAULT_CONTENT_TYPE)
