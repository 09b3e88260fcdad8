"""HTTP surface for the outfit stylist."""
