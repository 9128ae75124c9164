"""Chat CRM database seeding tools."""

__version__ = "0.1.0"
