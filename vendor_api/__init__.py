"""Vendor master-data API: vendors, bank accounts, contact persons and users."""
