"""
FlashFreq v1.0.0

Column value-distribution explorer for CSV files.  Loads one CSV file,
lets the user pick a column and shows its frequency table, percentage
shares, descriptive statistics (for numeric columns), a searchable
top-N view and a bar chart.  Results can be exported back to CSV.
"""

APP_NAME = "FlashFreq"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-18"
__version__ = APP_VERSION
