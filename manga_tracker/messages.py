"""User-facing message templates and constants.

Centralizes every string the command line prints so wording stays consistent
between successful checks, non-fatal notes and failures.
"""

CHAPTER_MESSAGE = "{title} - Chapter {chapter_number}"
CHAPTER_TITLE_SUFFIX = ": {chapter_title}"
STORED_SUFFIX = " [id {id}]"
NOTE_LINE = "Note: {message}"

# Error messages
ERROR_PARSE = "Could not read {url} ({stage}): {reason}"
ERROR_UNSUPPORTED_HOST = "Unsupported site for {url}. Supported hosts: {hosts}"
ERROR_FETCH = "Could not fetch {url}: {reason}"

NO_STORED_MANGA = "No manga stored yet"

# Human readable names for parsing stages
STAGE_NAMES = {
    "resolve": "site lookup",
    "chapter_heading": "chapter list",
    "title": "manga title",
    "chapter_number": "chapter number",
    "cover_image": "cover image",
}
