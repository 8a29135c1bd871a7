"""Domain layer: models, repository interfaces, services and errors.

Nothing in this package imports SQLAlchemy or any other infrastructure.
"""
