"""Manga Tracker Application Package.

Extracts the latest chapter of a manga series from reader sites and keeps
track of it. Each supported site has its own parsing strategy selected by the
host of the page URL.

The application follows a modular architecture with separate concerns for:
- Site-specific HTML parsing and the host-to-parser registry
- Page fetching over HTTP
- Persistence of extracted chapter records
- User-facing formatting of results and failures
"""
