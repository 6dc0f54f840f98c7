"""
Visit module: home and center visit scheduling for registered patients.
"""
