"""Health profile domain: user records, body fat, calories and macros."""
