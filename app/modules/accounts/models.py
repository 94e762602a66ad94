# Supabase table: accounts
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in store.py

"""
Expected Supabase table structure:

accounts:
- email: text (unique, not null) - natural key, exact match
- username: text (unique, not null)
- password_hash: text (not null) - base64 SHA-256 digest, never the plaintext
- created_at: timestamptz (not null, set once)
- last_login_at: timestamptz (nullable) - updated on every successful login
- auth_method: text (default 'local') - 'google' is reserved, nothing sets it
- google_id: text (nullable) - unused, reserved for non-local auth
- picture: text (nullable) - account-level picture URL, set at signup
- email_verified: boolean (default false) - no verification flow exists

The unique constraints back up the application-level existence checks made
before insert; a violation is reported as the same conflict as the check.
"""

ACCOUNT_LIST_COLUMNS = "email, username, created_at, last_login_at"
