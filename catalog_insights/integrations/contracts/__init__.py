"""
Contracts (data models).

Shapes shared by the catalog clients and the analyzer: products, filter
history entries and operation outcomes. Both mock and real clients return data
that normalises into these models.
"""
