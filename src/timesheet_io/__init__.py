"""Workbook, config file and template I/O for the timesheet filler."""
