"""Module for defining constants that don't require imports or functions, using only pure Python."""

# Releases prior to this version are never indexed.
FLOOR_VERSION = '1.0.0'

GITHUB_RELEASES_API_URL = 'https://api.github.com/repos/elixir-lang/elixir/releases'
