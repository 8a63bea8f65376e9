"""Services that surround page extraction.

Fetching pages over HTTP, storing chapter records, and the tracking pipeline
that ties fetching, parsing and storage together.
"""
