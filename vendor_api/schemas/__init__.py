"""Pydantic schemas package.

Folder intent:
  common.py          — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  vendor.py          — vendor shapes, plus the child read shapes that embed a vendor
  bank_account.py    — bank account shapes (nested, create, update, read)
  contact_person.py  — contact person shapes (same set as bank accounts)
  user.py            — user management
  auth.py            — login and token refresh
"""
