"""Employee Attendance Tracker package.

A small REST API over a single MySQL table of attendance records. The package
is organized by feature modules (attendance, stats, health) with a thin Flask
controller layer on top of service/repository layers.
"""
