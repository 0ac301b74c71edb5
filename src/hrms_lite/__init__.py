"""HRMS Lite package.

Organized by feature modules (employees, attendance) with a thin Flask
controller layer on top of service/repository layers.
"""
