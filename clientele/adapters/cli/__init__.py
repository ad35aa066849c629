"""Command-line interface adapters.

Provides CLI commands for working with customers:
- create: Create a customer from name parts and contacts
- split: Show how a name splits into first and last name
- contact: Check whether a value is accepted as a contact
"""
