"""Employee Attendance package.

Organized by feature modules (employees, attendance, reports) with a thin
Flask controller layer over service/repository layers.
"""
