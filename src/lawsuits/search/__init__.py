from lawsuits.search.engine import detect_degree_shorthand, filter_by_degree, matches_text, search

__all__ = ['detect_degree_shorthand', 'filter_by_degree', 'matches_text', 'search']
