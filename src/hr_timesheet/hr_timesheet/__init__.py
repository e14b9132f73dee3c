"""HR timesheet backend package.

This package is organized by feature modules (attendance, timesheet, employees,
users, audit, ...) with a thin Flask controller layer over service/repository layers.
"""
