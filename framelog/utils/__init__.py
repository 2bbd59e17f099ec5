"""
Utility modules for framelog.

Modules:
    - env: .env loading and parsing of FRAMELOG_* variable values
"""
