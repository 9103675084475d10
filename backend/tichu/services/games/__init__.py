"""Game domain services: scoring, serialization and snapshot storage.

``scoring`` and ``types`` are pure and may be used without Flask. ``storage``
needs an application context; HTTP routes and socket handlers go through it
so transport concerns stay out of the scoring rules.
"""
