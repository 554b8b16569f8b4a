"""
cfaudit - broken content-fragment path resolution.

Takes the list of content-fragment paths that no longer resolve and proposes
a fix for each one: publish it, fall back to another locale, or point to a
similarly named sibling.
"""

__version__ = "0.3.0"
