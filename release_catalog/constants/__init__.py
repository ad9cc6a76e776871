"""Constants shared across the catalog.

`standalone` holds plain values; `local` holds paths computed from the
environment. A value used by a single module lives in that module instead.
"""
