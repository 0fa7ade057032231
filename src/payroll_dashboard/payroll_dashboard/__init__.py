"""Payroll Dashboard package.

This package is organized by feature modules (employees, ledger, payroll, ...)
with a thin Flask controller layer and service/repository layers.
"""
