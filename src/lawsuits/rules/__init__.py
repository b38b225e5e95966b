from lawsuits.rules.proceeding_selector import parse_timestamp, recency, select_current

__all__ = ['parse_timestamp', 'recency', 'select_current']
