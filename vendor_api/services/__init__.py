"""Services package — all business logic lives here, never in routers.

Files:
  vendor.py          — vendors (+ inline children on create)
  bank_account.py    — bank accounts (IBAN/BIC checked)
  contact_person.py  — contact persons (phone checked + normalized)
  user.py            — user management
  auth.py            — login / token refresh
  seed.py            — startup database initializer
  validators.py      — IBAN, BIC, phone and password rules
  mapping.py         — ORM row <-> schema conversions
  common.py          — id / save-result checks shared by the entity services

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
