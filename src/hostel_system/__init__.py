"""Hostel Management System package.

Organized by feature modules (students, rooms, fees, attendance, ...) with a
thin Flask controller layer over service/repository layers backed by an
in-memory store.
"""
