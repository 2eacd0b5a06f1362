"""
numparser - data

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""

from importlib import resources
import json

# copyright metadata
_METADATA = json.loads(resources.files(__package__).joinpath('meta.json').read_bytes())
NAME, VERSION, AUTHOR, COPYRIGHT, DESCRIPTION = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright', 'description'
))
