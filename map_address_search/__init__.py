"""Map Address Search: zip code lookup, maps deep links, address map and pins."""

__version__ = '0.1.0'
