"""
Loan Decision Gateway - Loan Eligibility Service

A FastAPI-based microservice that evaluates a customer's national
identity code, requested loan amount and requested period, and returns
the best loan offer that can be approved.
"""

__version__ = "0.1.0"
