"""
Notification module: role based alerts, including the automatic
high-risk registration alert.
"""
