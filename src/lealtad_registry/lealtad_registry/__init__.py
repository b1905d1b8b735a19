"""Lealtad Comercial registry package.

Organized by feature modules (notifications, infractions, inspections, ...)
with a thin Flask controller layer over service/repository layers. Records
live in the office spreadsheet behind a web endpoint, or in local JSON files
when no endpoint is configured.
"""
