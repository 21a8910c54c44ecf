"""Domain layer — bills, orders, change-making rules, and the report format.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, api, or config.
"""
