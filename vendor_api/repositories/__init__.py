"""Repositories package — every SQLAlchemy query lives here.

Files:
  base.py            — BaseRepository + SaveResult (optimistic concurrency outcome)
  vendor.py          — vendors with their children
  bank_account.py    — bank accounts with their vendor
  contact_person.py  — contact persons with their vendor
  user.py            — users and roles
"""
