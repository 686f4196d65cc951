"""
Service layer abstraction.

The employee store encapsulates all record bookkeeping so that API
handlers only translate HTTP input into store calls and store results
into responses.
"""
