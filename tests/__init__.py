"""
numparser tests

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""
