"""Timebank package.

Feature modules (schedules, punches, absences, balance, ...) follow the same
layering: frozen domain models, repository Protocols with a MySQL
implementation, services holding the business rules and a thin Flask
controller.
"""
