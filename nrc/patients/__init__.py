"""
Patient registration module: registration, lookup, updates and soft deletion.
"""
