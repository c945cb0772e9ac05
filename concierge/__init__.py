"""
Concierge restaurant directory search service.
"""
