"""punchclock package.

Employee time-tracking portal organized by feature modules (users, roles,
attendance, employees, payslips, ...) with a thin Flask controller layer on
top of service/repository layers.
"""

__version__ = "0.1.0"
