"""
Service-wide constants
"""

SERVICE_NAME = "clinic-agenda-backend"

# Widest span the blocked-days endpoint evaluates in one request
MAX_CALENDAR_RANGE_DAYS = 366
