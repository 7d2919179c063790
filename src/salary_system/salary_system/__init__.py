"""Salary System package.

This package is organized by feature modules (salary, works, cli, ...)
with a thin interactive shell on top of the service/repository layers.
"""
