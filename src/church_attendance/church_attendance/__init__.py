"""Church attendance package.

This package is organized by feature modules (members, attendance, visitors,
ledger, reports) with a thin Flask controller layer over service/repository layers.
"""
