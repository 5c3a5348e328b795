"""
Persistence layer.

Each resource has a repository bound to one MongoDB collection.  The
shared behaviour (insert, list, count, lookup, update and delete by
id) lives in :class:`~.base.MongoRepository`; subclasses only declare
their collection and whether they maintain timestamps.
"""
