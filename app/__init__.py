"""Referral dashboard application layer."""
