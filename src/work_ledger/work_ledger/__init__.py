"""Work Ledger package.

This package is organized by feature modules (holidays, accounting, entries,
settings, reports) with a thin Flask controller layer on top of plain
service/repository layers. The time-accounting engine lives in ``accounting``
and only works on the values it is given.
"""
