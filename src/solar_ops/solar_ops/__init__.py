"""Solar operations back office package.

This package is organized by feature modules (employees, projects, plansets,
attendance, leave, payroll, ...) with a thin Flask controller layer over
service and repository layers backed by in-memory record stores.
"""
