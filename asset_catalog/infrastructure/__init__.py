"""
Infrastructure layer - external service integrations.

- storage: Object storage listings (Supabase Storage)

These wrappers translate between external formats and our domain models.
"""
