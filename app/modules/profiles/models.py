# Supabase table: profile
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in store.py

"""
Expected Supabase table structure:

profile:
- email: text (unique, not null) - soft reference to accounts.email, no FK
- username: text (not null) - copied from the account at signup, never re-synced
- picture: text (nullable) - updated independently of accounts.picture
- bio: text (nullable)
- location: text (nullable)
- phone_number: text (nullable)

Accounts and profiles can be deleted independently, so a profile may outlive
its account and vice versa.
"""

UPDATABLE_PROFILE_FIELDS = ("bio", "location", "phone_number", "picture")
