"""Domain records, errors and path rules for share storage."""
