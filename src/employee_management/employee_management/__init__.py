"""Employee Management package.

Employee records are served by a thin Flask controller layer on top of
service/repository layers backed by MySQL.
"""
