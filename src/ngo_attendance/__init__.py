"""NGO Attendance package.

This package is organized by feature modules (participants, sessions, reports)
with a thin Flask controller layer over service/repository layers backed by a
key-value store.
"""
