"""Exact-decimal polynomials: parsing, arithmetic and numeric integration."""
