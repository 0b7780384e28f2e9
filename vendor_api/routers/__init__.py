"""Routers package — HTTP endpoint definitions, all mounted under /api.

Files:
  vendors.py          — /api/vendor
  bank_accounts.py    — /api/bankaccount
  contact_persons.py  — /api/contactperson
  users.py            — /api/user (Admin)
  auth.py             — /api/auth/login, /api/auth/refresh-token (anonymous)
  deps.py             — cache / token / principal dependencies and the role guard

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_api/services/.
"""
