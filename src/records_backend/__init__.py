"""
Employee Records Backend - REST API and web client for employee records
"""

__version__ = "1.0.0"
