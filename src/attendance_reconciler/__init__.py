"""Attendance reconciler package.

Reconciles biometric punch feeds with self-reported work logs per person-day.
Organized by feature modules (punches, worklogs, discrepancies, compliance)
with a thin Flask controller layer on top of pure service code.
"""

__version__ = "0.1.0"
