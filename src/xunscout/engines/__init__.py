"""Search engine layer — Pluggable drivers for full-text search servers.

Built-in engines:
  - xunsearch: Xunsearch (buffered indexing, fuzzy full-text search)

Implement ``SearchEngine`` to add another backend.
"""
