"""
Timesheet Engine

Month column resolution, balance carry-forward and field writing for
fixed-layout leave timesheet workbooks.
"""
