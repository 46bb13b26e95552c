"""Timekeeper package.

Attendance, fine and leave calculations for a single organization, organized
by feature modules (policy, attendance, leaves, workdays, reports) with pure
calculation functions underneath thin service/repository layers.
"""
