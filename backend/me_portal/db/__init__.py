"""
Database module for the M&E Portal

Contains the admin bootstrap used by scripts/init_db.py.
"""
