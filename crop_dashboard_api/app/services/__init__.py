"""
Service layer abstraction.

Services hold the SQL run against the listings store so that route
handlers only deal with HTTP concerns.
"""
