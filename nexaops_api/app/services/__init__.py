"""
Service layer abstraction.

``validators`` holds the pure validation rules, ``record_store`` the
database access for one table, and ``resource_service`` combines the
two for each resource described in ``resources``.  Demo notifications
live in ``notification_service`` and never touch the database.
"""
