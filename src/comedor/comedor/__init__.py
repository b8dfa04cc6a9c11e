"""Comedor admin package.

Weekly cafeteria menus and daily attendance confirmations, organized by
feature modules (menus, confirmations, employees, reports, ...) over a
document store, with a thin Flask controller layer on top.
"""
