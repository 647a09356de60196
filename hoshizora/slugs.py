# hoshizora/slugs.py
"""
Slug helpers shared by the server (category service, admin forms) and the
category management client.
"""

import re
from urllib.parse import quote

# Final form accepted for a stored slug
SLUG_PATTERN = re.compile(r'^[a-z0-9-]+$')

THAI_RANGE = 'ก-๙'

_STRAY_PERCENT = re.compile(r'%(?![0-9a-f]{2})')
_DISALLOWED = re.compile(rf'[^a-z0-9_\s{THAI_RANGE}%-]')
_WHITESPACE = re.compile(r'\s+')
_THAI_RUN = re.compile(rf'[{THAI_RANGE}]+')
_HYPHENS = re.compile(r'-+')


def _encode_run(match):
    return quote(match.group(0), safe='').lower()


def derive_slug(name):
    """
    Turn a display name into a URL-safe slug.

    Latin letters and digits are kept, whitespace runs become hyphens and Thai
    runs are percent-encoded. Running the result through again returns it
    unchanged, so ``derive_slug(derive_slug(x)) == derive_slug(x)``.

    >>> derive_slug('My Category!')
    'my-category'
    """
    text = (name or '').lower()
    # Escapes already in the text survive; lone percent signs do not.
    text = _STRAY_PERCENT.sub('', text)
    text = _DISALLOWED.sub('', text)
    text = _WHITESPACE.sub('-', text)
    text = _THAI_RUN.sub(_encode_run, text)
    text = _HYPHENS.sub('-', text)
    return text.strip('-')


def is_valid_slug(slug):
    return bool(slug) and SLUG_PATTERN.fullmatch(slug) is not None
