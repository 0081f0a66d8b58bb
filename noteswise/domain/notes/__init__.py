"""
Notes bounded context - Domain layer.

Aggregates:
- Category: owner-defined grouping of notes
- Note: a titled text owned by one user, optionally filed under a category
"""
